from typing import Optional, Protocol


class AppHooks(Protocol):
    """
    Protocol for application hooks used by the tree intelligence pipelines.

    The host application can implement this to surface progress while the
    inference rules, suggestion detectors and statistics collectors run.

    Methods:
        report_step(info, target, reset_counter, plus_step) -> None:
            Report a progress step.
    """
    def report_step(self, info: str = "", target: Optional[int] = None, reset_counter: bool = False, plus_step: int = 0) -> None:
        """
        Report progress messages from a pipeline.

        Args:
            info (str): Progress message.
            target (int): Target count for progress.
            reset_counter (bool): Whether to reset the counter.
            plus_step (int): Incremental step count.
        """
        pass


def report_step(app_hooks: Optional[AppHooks], logger, info: str = "", target: Optional[int] = None, reset_counter: bool = False, plus_step: int = 0) -> None:
    """
    Report a step via app hooks if available, otherwise log it at debug level.

    Args:
        app_hooks: Optional application hooks object.
        logger: Logger used when no hooks are available.
        info (str): Information message.
        target (int): Target count for progress.
        reset_counter (bool): Whether to reset the counter.
        plus_step (int): Incremental step count.
    """
    if app_hooks and callable(getattr(app_hooks, "report_step", None)):
        app_hooks.report_step(info=info, target=target, reset_counter=reset_counter, plus_step=plus_step)
    elif info:
        logger.debug(info)
