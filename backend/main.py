"""
Mission Canvas Backend - FastAPI entry point.
Serves mission step layouts for the planner canvas.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api import register_routes

app = FastAPI(title="Mission Canvas Backend")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_routes(app)


@app.get("/api/health")
async def api_health():
    return {"status": "ok"}
