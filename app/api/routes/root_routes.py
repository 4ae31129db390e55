# app/api/routes/root_routes.py
from fastapi import APIRouter

router = APIRouter()


@router.get("/")
async def read_root():
    return {"message": "Mokri Assistant API is running"}
