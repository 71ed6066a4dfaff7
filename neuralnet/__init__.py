'''
Name: DLP Lab1
Topic: back-propagation
Author: CHEN, KE-RONG
Date: 2025/07/02
'''
from .errors import NetworkError, ShapeMismatchError, InvalidConfigurationError
from .network import Network, create_network
from .trainer import Trainer
from .logging_config import setup_logging
