"""
Problem post-processing: the contract, the pipeline and the built-in processors.
"""
from problemkit.postprocessing.base import ProblemContext, ProblemPostProcessor
from problemkit.postprocessing.context_injector import ContextPropertiesInjector
from problemkit.postprocessing.defaults import ProblemDefaultsProvider
from problemkit.postprocessing.pipeline import PostProcessingPipeline
from problemkit.postprocessing.problem_logger import ProblemLogger

__all__ = [
    "ContextPropertiesInjector",
    "PostProcessingPipeline",
    "ProblemContext",
    "ProblemDefaultsProvider",
    "ProblemLogger",
    "ProblemPostProcessor",
]
