#!/usr/bin/env python3
"""
Service exceptions and their JSON error responses.

Every error body has the same shape:
    {"success": false, "error": "<message>", "type": "<exception class>"}
"""

import logging
from fastapi import Request, HTTPException
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ServiceException(Exception):
    """Base exception for recommendation service errors."""
    status_code = 500


class NotFoundException(ServiceException):
    status_code = 404


class CompanyNotFoundException(NotFoundException):
    """No company profile with the given id."""


class InternshipNotFoundException(NotFoundException):
    """Internship missing or owned by another company."""


class ApplicationNotFoundException(NotFoundException):
    """Application missing or owned by another company."""


class InvalidRequestException(ServiceException):
    """Malformed path or body parameter, such as a non-UUID id."""
    status_code = 400


def error_response(status_code: int, message: str, error_type: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": message, "type": error_type}
    )


async def service_exception_handler(request: Request, exc: ServiceException) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"Service error in {request.url.path}: {exc}", exc_info=True)
    else:
        logger.info(f"{exc.__class__.__name__} in {request.url.path}: {exc}")
    return error_response(exc.status_code, str(exc), exc.__class__.__name__)


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    return error_response(exc.status_code, exc.detail, "HTTPException")


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unexpected error in {request.url.path}")
    return error_response(500, "Internal server error", "InternalError")
