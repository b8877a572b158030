"""
Climate Projections - Utilities Module
Provides configuration and logging helpers shared by the dashboard and CLI.
"""

import os
import yaml
import logging
from pathlib import Path
from typing import Dict, Any, Optional


def setup_logging(config: Dict[str, Any]) -> logging.Logger:
    """
    Set up logging configuration.

    Parameters:
    -----------
    config : dict
        Configuration dictionary containing logging settings

    Returns:
    --------
    logging.Logger
        Configured logger instance
    """
    log_config = config.get('logging', {})
    log_level = getattr(logging, log_config.get('level', 'INFO'))
    log_format = log_config.get('format', '%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    handlers = [logging.StreamHandler()]

    # Create logs directory if it doesn't exist
    log_file = log_config.get('file', 'logs/climate_projections.log')
    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        handlers.insert(0, logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format=log_format,
        handlers=handlers
    )

    return logging.getLogger('climate_projections')


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load configuration from YAML file.

    Parameters:
    -----------
    config_path : str, optional
        Path to configuration file. If None, uses default path.

    Returns:
    --------
    dict
        Configuration dictionary
    """
    if config_path is None:
        # Get the project root directory
        project_root = Path(__file__).parent.parent
        config_path = str(project_root / 'config' / 'config.yaml')

    with open(config_path, 'r', encoding='utf-8') as f:
        config = yaml.safe_load(f)

    return config or {}
