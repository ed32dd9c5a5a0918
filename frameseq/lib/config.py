'''
config module

This module handles configuration for the frameseq package. Settings are
merged from built in defaults, FRAMESEQ_ environment variables and a yaml
config file, in that order of precedence.
'''

import logging
import os
import sys

import yaml

from frameseq.lib import loggeria

logger = logging.getLogger(__name__)

ENV_PREFIX = 'FRAMESEQ_'
CONFIG_ENV_VAR = 'FRAMESEQ_CONFIG'


class Config(object):
    default_config = {'log_level': loggeria.LEVEL_INFO}
    default_config_locations = {'linux': os.path.join(os.getenv('HOME', ''), '.frameseq', 'config.yml'),
                                'win32': os.path.join(os.getenv('APPDATA', ''), 'frameseq', 'config.yml'),
                                'darwin': os.path.join(os.getenv('HOME', ''), 'Library', 'Application Support', 'frameseq', 'config.yml')}

    def __init__(self):
        # create config. precedence is default, ENV, file
        combined_config = dict(self.default_config)
        combined_config.update(self.get_environment_config())
        combined_config.update(self.get_user_config())

        self.validate_log_level(combined_config)

        self.config = combined_config
        logger.debug('config is:\n%s', self.config)

    @staticmethod
    def validate_log_level(config):
        log_level = str(config.get('log_level', loggeria.LEVEL_INFO)).upper()
        if log_level not in loggeria.LEVEL_MAP:
            message = "log_level must be one of %s, not %r" % (", ".join(loggeria.LEVELS), log_level)
            logger.error(message)
            raise ValueError(message)
        config['log_level'] = log_level

    def get_environment_config(self):
        '''
        Look for any environment settings that start with FRAMESEQ_
        Cast any variables to bools if necessary
        '''
        skipped_variables = [CONFIG_ENV_VAR]
        environment_config = {}
        for var_name, var_value in os.environ.items():
            # skip these options
            if not var_name.startswith(ENV_PREFIX) or var_name in skipped_variables:
                continue

            config_key_name = var_name[len(ENV_PREFIX):].lower()
            environment_config[config_key_name] = self._process_var_value(var_value)

        return environment_config

    @classmethod
    def _process_var_value(cls, env_var):
        '''
        Read the given value (which was read from an environment variable, and
        process it onto an appropriate value for the config.yml file.
        1. cast integers strings to python ints
        2. cast bool strings into actual python bools
        '''
        # Cast integers
        if env_var.isdigit():
            return int(env_var)

        # Cast booleans
        bool_values = {"true": True,
                       "false": False}

        return bool_values.get(env_var.lower(), env_var)

    def get_config_file_paths(self):
        if CONFIG_ENV_VAR in os.environ:
            # We need to take into account multiple paths
            possible_paths = [x for x in os.environ[CONFIG_ENV_VAR].split(os.pathsep) if len(x) > 0]
            if len(possible_paths) > 0:
                return possible_paths
        # This is for when FRAMESEQ_CONFIG variable is empty.
        platform = 'linux' if sys.platform.startswith('linux') else sys.platform
        default_path = self.default_config_locations.get(platform)
        return [default_path] if default_path else []

    def get_user_config(self):
        config_files = self.get_config_file_paths()
        for config_file in config_files:
            logger.debug('Attempting to load config located at: %s', config_file)

            if not os.path.isfile(config_file):
                logger.debug('Config filepath: %s does not point to a file', config_file)
                continue

            logger.debug('Loading config: %s', config_file)
            with open(config_file, 'r') as fp:
                config = yaml.safe_load(fp)

            # an empty file is fine
            if config is None:
                return {}

            if not isinstance(config, dict):
                message = 'config found at %s is not in proper yaml syntax' % config_file
                logger.error(message)
                raise ValueError(message)

            logger.debug('config is %s', config)
            return config

        if CONFIG_ENV_VAR in os.environ:
            logger.warning('No valid config files found in %s', os.environ[CONFIG_ENV_VAR])
        return {}


def load_config():
    '''
    Create a new config object based on config.yml and return it
    Set up logging based on configuration loaded
    '''
    configuration = Config().config
    # If there is log level specified in config (which by default there should be)
    # then set it for frameseq's logger
    log_level = configuration.get("log_level")
    if log_level:
        loggeria.set_frameseq_log_level(log_level)
    return configuration
