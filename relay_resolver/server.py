import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from relay_resolver.api.graphql.router import graphql_router
from relay_resolver.core.config import get_settings

settings = get_settings()

logging.basicConfig(level=settings.LOG_LEVEL)

app = FastAPI(title=settings.PROJECT_NAME, version=settings.VERSION)

origins = [
    "http://localhost:3001",
    "http://127.0.0.1:3001",
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(graphql_router, prefix="/graphql", tags=["graphql"])

@app.get("/", tags=["Root"])
async def read_root():
    return {"message": f"Welcome to the {settings.PROJECT_NAME}"}

# Optional: Add logic to run the server directly for development
if __name__ == "__main__":
    uvicorn.run("relay_resolver.server:app", host="0.0.0.0", port=8000, reload=True)
