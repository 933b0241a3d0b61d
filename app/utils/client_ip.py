"""
Client IP extraction
Resolves the caller's address behind proxies and load balancers.
"""
from fastapi import Request


def get_client_ip(request: Request) -> str:
    """
    Return the best guess at the real client address

    Checked in order:
    1. X-Forwarded-For (left-most entry is the original client)
    2. X-Real-IP
    3. The directly connected peer

    Args:
        request: Incoming request

    Returns:
        str: Client IP address, or "unknown"
    """
    forwarded_for = request.headers.get("X-Forwarded-For")
    if forwarded_for:
        return forwarded_for.split(",")[0].strip()

    real_ip = request.headers.get("X-Real-IP")
    if real_ip:
        return real_ip

    if request.client:
        return request.client.host

    return "unknown"
