"""
Liveness endpoint shared by every service.
"""

from typing import Dict

from fastapi import APIRouter, Request

router = APIRouter()


@router.get("/health")
async def health(request: Request) -> Dict[str, str]:
    return {"service": request.app.state.service_name, "status": "healthy"}
