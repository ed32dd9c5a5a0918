'''
exceptions module

This module holds the errors raised while parsing frame sequence strings.
Every error inherits from FrameSpecError (itself a ValueError), so callers
can catch the whole family at once or pick out a single kind.
'''


class FrameSpecError(ValueError):
    '''
    A frame sequence string could not be parsed
    '''


class InvalidSyntax(FrameSpecError):
    '''
    A clause does not have the shape of a single frame or a range, e.g. an
    empty clause, a range with a missing bound, or a stray "@"
    '''

    def __init__(self, clause):
        self.clause = clause
        super(InvalidSyntax, self).__init__("Invalid frame spec clause: %r" % clause)


class InvalidInteger(FrameSpecError):
    '''
    A token that should be a frame number is not an integer, or is too large
    '''

    def __init__(self, token):
        self.token = token
        super(InvalidInteger, self).__init__("Invalid frame number: %r" % token)


class InvalidStep(FrameSpecError):
    '''
    A step specifier is neither "b" nor a positive integer
    '''

    def __init__(self, token):
        self.token = token
        super(InvalidStep, self).__init__(
            "Invalid step: %r. Step must be a positive integer or 'b'" % token)
