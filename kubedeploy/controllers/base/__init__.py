"""Result types shared by remote operations."""

from kubedeploy.controllers.base.base_controller import (
    ApiResult,
    result_error_text,
)

__all__ = [
    "ApiResult",
    "result_error_text",
]
