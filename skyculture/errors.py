from fastapi import HTTPException
import logging
from typing import Optional

logger = logging.getLogger(__name__)


class SkyCultureError(Exception):
    """
    Base error for sky-culture loading.

    Carries the same code/title/detail/tip fields the HTTP layer returns,
    so a construction failure can be reported verbatim.
    """

    code = "SKYCULTURE.ERROR"
    title = "Sky culture error"

    def __init__(self, detail: str = "", tip: str = ""):
        super().__init__(f"{self.code}: {detail}" if detail else self.code)
        self.detail = detail
        self.tip = tip

    def to_dict(self):
        return {
            "code": self.code,
            "title": self.title,
            "detail": self.detail,
            "tip": self.tip
        }


class ConfigError(SkyCultureError):
    code = "CONFIG.INVALID"
    title = "Invalid configuration"


class AssetNotFoundError(SkyCultureError):
    code = "ASSET.NOT_FOUND"
    title = "Required asset missing"

    def __init__(self, path: str, tip: str = "Check skyculture.asset_root and the culture name."):
        super().__init__(f"Asset not available: {path}", tip)
        self.path = path


class CatalogParseError(SkyCultureError):
    code = "CATALOG.PARSE_ERROR"
    title = "Malformed sky culture data"

    def __init__(self, detail: str, line_number: Optional[int] = None, tip: str = ""):
        if line_number is not None:
            detail = f"line {line_number}: {detail}"
        super().__init__(detail, tip)
        self.line_number = line_number


class IdentifierResolutionError(CatalogParseError):
    code = "CATALOG.UNRESOLVED_IDENTIFIER"
    title = "Star designation could not be resolved"

    def __init__(self, token: str, key: str, line_number: Optional[int] = None):
        super().__init__(
            f"'{token}' ({key}) does not resolve to an HD number",
            line_number,
            "Add the designation to the identifiers registry file."
        )
        self.token = token
        self.key = key


def not_found(code: str, title: str, detail: str = "", tip: str = ""):
    """
    Raise a 404 Not Found exception with structured error response.

    Args:
        code: Error code following CATEGORY.SPECIFIC_ERROR pattern
        title: Human-readable error title
        detail: Specific details about this error instance
        tip: Actionable guidance for resolving the error
    """
    error_response = {
        "code": code,
        "title": title,
        "detail": detail,
        "tip": tip
    }
    logger.warning(f"Not found: {code} - {title} - {detail}")
    raise HTTPException(status_code=404, detail=error_response)


def service_unavailable(code: str = "SERVICE.UNAVAILABLE",
                        title: str = "Service temporarily unavailable",
                        detail: str = "Sky culture catalog is not loaded.",
                        tip: str = "Retry after a few moments."):
    """
    Raise a 503 Service Unavailable exception.

    Args:
        code: Error code
        title: Error title
        detail: Error details
        tip: Resolution tip
    """
    error_response = {
        "code": code,
        "title": title,
        "detail": detail,
        "tip": tip
    }
    logger.warning(f"Service unavailable: {detail}")
    raise HTTPException(status_code=503, detail=error_response)
