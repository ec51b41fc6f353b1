#!/usr/bin/env python3
"""
Example usage of ff-clog showing the auto console logger, explicit
initialization and trace ids.
"""

import ff_clog
from ff_clog import LoggerConfig, with_trace_id


def main():
    print("=" * 60)
    print("FF-CLOG USAGE EXAMPLES")
    print("=" * 60)

    # Example 1: Zero configuration
    print("\n1. Auto console logger (debug level, no service tag):")
    ff_clog.debug(None, "logging works before any setup")

    # Example 2: Explicit initialization silences the auto logger
    print("\n2. Console initialized for a service at info level:")
    ff_clog.init_logger("console", LoggerConfig(level="info", service="example-app"))

    ctx = with_trace_id("req-123")
    ff_clog.debug(ctx, "not printed, below info")
    ff_clog.info(ctx, "processing request for user %d", 42)
    ff_clog.warn(ctx, "slow response: %dms on %s", 1500, "/api/users")

    # Example 3: Runtime level changes
    print("\n3. Raising the threshold at runtime:")
    ff_clog.set_level("console", "fatal")
    ff_clog.warn(ctx, "not printed")
    ff_clog.fatal(ctx, "fatal is only a level; the process keeps running")
    ff_clog.set_level_all("debug")
    ff_clog.debug(ctx, "debug is back")

    # Example 4: Reopen reports per-backend failures
    print("\n4. Reopen:")
    result = ff_clog.reopen()
    print(f"  reopen ok={result.ok} report={str(result)!r}")


if __name__ == "__main__":
    main()
