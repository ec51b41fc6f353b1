#!/usr/bin/env python3
"""
Example demonstrating several backends receiving the same log calls.

Shows how a custom backend is added by subclassing LeveledBackend and
registering it next to the console backend.
"""

import ff_clog
from ff_clog import CaptureBackend, LeveledBackend, Level, LoggerConfig, NullBackend


class AlertBackend(LeveledBackend):
    """Collects fatal lines so they can be forwarded to an on-call channel."""

    def __init__(self):
        super().__init__()
        self.alerts = []

    def _emit(self, level, ctx, message, **fields):
        self.alerts.append(f"{fields['service']}: {message}")


def main():
    alerts = AlertBackend()
    audit = CaptureBackend()

    ff_clog.register_logger("alerts", alerts)
    ff_clog.register_logger("audit", audit)
    ff_clog.register_logger("quiet", NullBackend())

    ff_clog.init_logger("console", LoggerConfig(level="info", service="orders"))
    ff_clog.init_logger("alerts", LoggerConfig(level="fatal", service="orders"))
    ff_clog.init_logger("audit", {"level": "debug", "service": "orders"})

    ctx = ff_clog.with_trace_id(9001)
    ff_clog.debug(ctx, "cart loaded")
    ff_clog.info(ctx, "order %s placed", "A-17")
    ff_clog.fatal(ctx, "payment provider unreachable")

    print(f"\nalerts: {alerts.alerts}")
    print(f"audit captured {len(audit.entries)} lines:")
    for entry in audit.entries:
        print(f"  {entry['level'].text:<5} {entry['trace_id']} {entry['event']}")

    # Disable the audit backend without unregistering it
    ff_clog.enable_logger("audit", False)
    ff_clog.info(ctx, "not audited")
    assert audit.entries[-1]["level"] is Level.FATAL

    ff_clog.shutdown()


if __name__ == "__main__":
    main()
