from .logging import LoggerFactoryProtocol, LoggerLikeProtocol
from .text import PreprocessorProtocol, SegmenterProtocol
