#!/usr/bin/env python3
"""
procaudit - Process command-line compliance checks
Main entry point for the application.
"""

import os
import sys
import argparse
import logging
import yaml
from datetime import datetime

from checks.engine import CheckEngine
from checks.rules import RuleError
from utils.reporter import Reporter

# Setup logging
def setup_logging(log_level):
    """Configure logging settings"""
    log_levels = {
        'debug': logging.DEBUG,
        'info': logging.INFO,
        'warning': logging.WARNING,
        'error': logging.ERROR,
        'critical': logging.CRITICAL
    }

    level = log_levels.get(log_level.lower(), logging.INFO)

    # Create logs directory if it doesn't exist
    if not os.path.exists('logs'):
        os.makedirs('logs')

    # Set up logging to file and console
    timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
    log_file = f"logs/procaudit_{timestamp}.log"

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.FileHandler(log_file),
            logging.StreamHandler()
        ]
    )

    return logging.getLogger('procaudit')

def load_config(config_path):
    """Load configuration from YAML file"""
    try:
        with open(config_path, 'r') as config_file:
            config = yaml.safe_load(config_file) or {}
    except (OSError, yaml.YAMLError) as e:
        logging.error(f"Failed to load configuration: {e}")
        return {}

    if not isinstance(config, dict):
        logging.error(f"Failed to load configuration: expected a mapping, got {type(config).__name__}")
        return {}

    return config

def parse_arguments(argv=None):
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(
        description='procaudit - Process command-line compliance checks'
    )

    parser.add_argument(
        '--config',
        default='/etc/procaudit/config.yaml',
        help='Path to configuration file'
    )

    parser.add_argument(
        '--log-level',
        choices=['debug', 'info', 'warning', 'error', 'critical'],
        default='info',
        help='Set logging level'
    )

    parser.add_argument(
        '--output-dir',
        default='./reports',
        help='Directory to store reports'
    )

    parser.add_argument(
        '--rule',
        help='Run only the rule with this id'
    )

    output_group = parser.add_argument_group('Output Options')
    output_group.add_argument(
        '--format',
        choices=['text', 'json', 'html'],
        default='text',
        help='Report output format'
    )

    return parser.parse_args(argv)

def main(argv=None):
    """Main entry point"""
    args = parse_arguments(argv)

    logger = setup_logging(args.log_level)
    logger.info("Starting procaudit")

    config = load_config(args.config)
    reporter = Reporter(args.output_dir, args.format)

    try:
        engine = CheckEngine(reporter, config)
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    with engine:
        try:
            count = engine.load_rules(config.get('rules', []), only=args.rule)
        except RuleError as e:
            logger.error(f"Invalid rule definition: {e}")
            return 1

        if args.rule and count == 0:
            logger.error(f"Rule {args.rule} not found")
            return 1

        results = engine.run_checks()

    reporter.generate_report()

    logger.info("procaudit run completed")

    return 1 if any(error is not None for error in results.values()) else 0

if __name__ == "__main__":
    sys.exit(main())
