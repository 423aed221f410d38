from .build import TextPipeline, count_files, make_pipeline
from .context import DEFAULT_TOP, PipelineSpec

__all__ = ["TextPipeline", "count_files", "make_pipeline", "DEFAULT_TOP", "PipelineSpec"]
