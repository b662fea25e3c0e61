#!/usr/bin/env python3
"""Basic usage example"""

import asyncio
import uuid

from message_logger import LoggerBuilder, MessageSeverity
from message_logger import extensions as ext
from message_logger.filters import PatternFilter


async def handle_request(logger, request_id):
    request_logger = ext.correlate(logger, request_id)
    await ext.info_async(request_logger, "Handling request {0}", request_id)
    await ext.debug_async(request_logger, "Request {0} done", request_id)


def main():
    # Create logger with builder pattern
    logger = (LoggerBuilder()
        .with_console(colored=True)
        .with_min_severity(MessageSeverity.DEBUG)
        .with_filter(PatternFilter(r"heartbeat", exclude=True))
        .build())

    # Log messages
    ext.debug(logger, "This is debug")
    ext.info(logger, "Application started on port {0}", 8080)
    ext.info(logger, "heartbeat")
    ext.warn(logger, "Disk usage at {0:.0%}", 0.93)

    try:
        try:
            {}["missing"]
        except KeyError as e:
            raise RuntimeError("lookup failed") from e
    except RuntimeError as e:
        ext.log_exception(logger, e)

    asyncio.run(handle_request(logger, uuid.uuid4()))


if __name__ == "__main__":
    main()
