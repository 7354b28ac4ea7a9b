from dataclasses import dataclass, field


@dataclass
class FeedMetrics:
    """Track fetch metrics for each feed."""
    name: str
    record_count: int = 0
    errors: int = 0
    error_messages: list = field(default_factory=list)
    duration_ms: float = 0.0
