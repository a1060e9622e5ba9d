from .scheduler import DeferredScheduler, ManualScheduler, SchedulerService

__all__ = ["DeferredScheduler", "ManualScheduler", "SchedulerService"]
