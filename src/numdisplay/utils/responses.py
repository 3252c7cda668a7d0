"""
Response envelopes for machine-readable command line output.
"""

from typing import Any, Callable, Dict, Optional
import traceback


def success(data: Any = None, **kwargs) -> Dict[str, Any]:
    """
    Create a standard success response.

    Args:
        data: Primary response data (optional)
        **kwargs: Additional fields to include in response

    Returns:
        Dictionary with success=True and optional data/fields

    Examples:
        >>> success("1 234.5", value=1234.5)
        {'success': True, 'data': '1 234.5', 'value': 1234.5}
    """
    response = {"success": True}
    if data is not None:
        response["data"] = data
    response.update(kwargs)
    return response


def error(message: str, code: Optional[str] = None, **kwargs) -> Dict[str, Any]:
    """
    Create a standard error response.

    Args:
        message: Human-readable error description
        code: Optional error code for programmatic handling
        **kwargs: Additional context fields

    Examples:
        >>> error("Not a number: 'abc'", code="PARSE_FAILED")
        {'success': False, 'error': "Not a number: 'abc'", 'error_code': 'PARSE_FAILED'}
    """
    response = {"success": False, "error": str(message)}
    if code:
        response["error_code"] = code
    response.update(kwargs)
    return response


def safe_execute(func: Callable, *args, include_trace: bool = False, **kwargs) -> Dict[str, Any]:
    """
    Execute a function and wrap its result (or exception) in a response.

    A result that is already a response dict is passed through unchanged.
    """
    try:
        result = func(*args, **kwargs)
        if isinstance(result, dict) and "success" in result:
            return result
        return success(result)
    except Exception as e:
        err_response = error(str(e))
        if include_trace:
            err_response["traceback"] = traceback.format_exc()
        return err_response
