from .step_timer import StepTimer

__all__ = ["StepTimer"]
