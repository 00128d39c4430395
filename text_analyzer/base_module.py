# text_analyzer/base_module.py
from abc import ABC, abstractmethod

from .logger import get_logger


class AnalysisModule(ABC):
    """
    Abstract base class for all text analysis modules.
    Each module produces one kind of result and implements its own 'analyze' method.
    """

    kind = None  # Key of this module's result in the engine output

    def __init__(self, config=None):
        self.module_name = self.__class__.__name__
        self.config = config if config else {}  # Module-specific config
        self.global_config = self.config.get("Global", {})  # Global config if passed down
        self.logger = get_logger(f"text_analyzer.{self.module_name}")

    @abstractmethod
    def analyze(self, text: str):
        """
        Analyzes the given text for the attribute this module is responsible for.

        Args:
            text (str): Non-empty text to analyze.

        Returns:
            A JSON-ready value (dict, list or str) describing the result.
        """
        pass

    def get_module_name(self) -> str:
        """Returns the name of the module."""
        return self.module_name
