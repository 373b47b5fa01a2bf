"""Domain errors raised by the post service and the store adapters."""


class PostError(Exception):
    """Base class for blog post errors. Carries the HTTP status it maps to."""

    status_code = 500

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail


class PostValidationError(PostError):
    status_code = 400


class PostNotFoundError(PostError):
    status_code = 404

    def __init__(self, post_id: str) -> None:
        super().__init__(f"Post not found: {post_id}")
        self.post_id = post_id


class StoreError(PostError):
    """The record store failed (connectivity, unexpected response)."""

    status_code = 500
