"""Kernel time – Clock port + implementations."""
from es_commons.kernel.time.clock import Clock, FrozenClock, SystemClock, to_epoch_millis

__all__ = ["Clock", "FrozenClock", "SystemClock", "to_epoch_millis"]
