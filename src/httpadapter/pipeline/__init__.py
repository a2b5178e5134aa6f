"""Send pipeline: ordered stages around one transport."""

from .context import PostSendContext
from .send import SendPipeline
from .stages import LoggingStage, Stage

__all__ = ["LoggingStage", "PostSendContext", "SendPipeline", "Stage"]
