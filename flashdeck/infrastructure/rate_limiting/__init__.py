from .rate_limiter import RateLimitConfig, RateLimiter

__all__ = ["RateLimitConfig", "RateLimiter"]
