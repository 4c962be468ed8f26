#!/usr/bin/env python3
"""Basic usage example"""

import sys

from tinylog import LoggerBuilder, Logger, LogLevel, enable_json_output


def level2():
    logger = Logger(LogLevel.INHERIT)
    logger.debug("Level 2", extras=["depth=2"])


def level1():
    logger = Logger(LogLevel.DEBUG)
    logger.debug("Level 1", with_location=True)

    level2()


def main():
    # Create logger with builder pattern
    logger = (LoggerBuilder()
        .with_text_output(sys.stdout)
        .build())
    enable_json_output(sys.stderr)

    logger.info("Hello debug users :D")
    logger.error("Hello all users :D")

    level1()

    # Closes the JSON array on stderr
    logger.close()

if __name__ == "__main__":
    main()
