import logging
import sys


class Log:
    """Process-wide logging facade.

    Keyword context is appended to the message as ``key=value`` pairs, e.g.
    ``Log.info("Comparison complete", policies=2)`` logs
    ``Comparison complete | policies=2``.
    """

    _logger: logging.Logger = logging.getLogger("policy_compare")

    @classmethod
    def configure(cls, log_level: str) -> None:
        """Set the level and attach a single stdout handler."""
        cls._logger.setLevel(log_level.upper())
        if not cls._logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(
                logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")
            )
            cls._logger.addHandler(handler)

    @staticmethod
    def render(message: str, context: dict[str, object]) -> str:
        if not context:
            return message
        fields = " ".join(f"{key}={value}" for key, value in context.items())
        return f"{message} | {fields}"

    @classmethod
    def info(cls, message: str, **context: object) -> None:
        cls._logger.info(cls.render(message, context))

    @classmethod
    def error(cls, message: str, **context: object) -> None:
        cls._logger.error(cls.render(message, context))

    @classmethod
    def warning(cls, message: str, **context: object) -> None:
        cls._logger.warning(cls.render(message, context))

    @classmethod
    def debug(cls, message: str, **context: object) -> None:
        # Prompt and response bodies are large; skip rendering when disabled.
        if cls._logger.isEnabledFor(logging.DEBUG):
            cls._logger.debug(cls.render(message, context))
