"""
Analysis engine facade.

`TextAnalysisEngine` owns one configured module per analysis kind and runs
the ones a request asks for. The engine keeps no state between calls.
"""

from .config import default_config, module_config
from .content import KeywordAnalyzer, SummaryAnalyzer, ReadabilityAnalyzer
from .logger import get_logger
from .models import AnalysisRequest
from .sentiment import SentimentAnalyzer

logger = get_logger(__name__)

MODULE_CLASSES = (SentimentAnalyzer, KeywordAnalyzer, SummaryAnalyzer, ReadabilityAnalyzer)


class TextAnalysisEngine:
    def __init__(self, config=None):
        self.config = config if config else default_config()
        self.modules = {}
        for module_cls in MODULE_CLASSES:
            self.register_module(module_cls(config=module_config(self.config, module_cls.__name__)))

    def register_module(self, module_instance):
        self.modules[module_instance.kind] = module_instance

    def analyze(self, text, options=None) -> dict:
        """
        Run the requested analyses on *text*.

        Args:
            text (str): Text to analyze; must contain non-whitespace characters.
            options: `{kind: bool}` mapping or iterable of kind names. None runs everything.

        Returns:
            dict: kind name -> result, containing only the requested kinds.

        Raises:
            InvalidInputError: empty text or unknown analysis kind.
        """
        request = AnalysisRequest.from_options(text, options)
        return self.run_analysis(request)

    def run_analysis(self, request: AnalysisRequest) -> dict:
        results = {}
        for kind in request.ordered_kinds():
            module = self.modules[kind]
            logger.debug("Running module %s", module.get_module_name())
            results[kind] = module.analyze(request.text)
        logger.debug("Analysis complete: %s", ", ".join(results) or "nothing requested")
        return results


_default_engine = None


def analyze(text, options=None) -> dict:
    """Analyze *text* with a default-configured engine."""
    global _default_engine
    if _default_engine is None:
        _default_engine = TextAnalysisEngine()
    return _default_engine.analyze(text, options)
