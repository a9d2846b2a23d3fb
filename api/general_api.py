import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import PlainTextResponse
from motor.motor_asyncio import AsyncIOMotorDatabase

from database import get_database
from schemas.auth import TokenTestResponse
from services.auth_service import create_access_token, verify_token

logger = logging.getLogger(__name__)

router = APIRouter()

# Demo identity for the debug token endpoint; not a real user
TEST_USER = {"_id": "test123", "email": "test@nesswear.com"}

@router.get("/", response_class=PlainTextResponse)
def read_root():
    return "NESS WEAR server is running..."

@router.get("/api/test-db")
async def test_db(db: AsyncIOMotorDatabase = Depends(get_database)):
    try:
        collections = await db.list_collection_names()
    except Exception:
        logger.exception("Database connectivity probe failed")
        raise HTTPException(status_code=500, detail="Database not connected")
    return {"message": "Database connected!", "collections": collections}

@router.get("/api/test-jwt", response_model=TokenTestResponse)
def test_jwt():
    token = create_access_token(TEST_USER)
    return {
        "message": "JWT token generated successfully",
        "token": token,
        "decoded": verify_token(token),
    }
