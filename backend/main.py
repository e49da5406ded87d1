from dotenv import load_dotenv
load_dotenv()

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import config
import store
from reaper import Reaper
from routes import session

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    reaper = Reaper(store.registry, config.REAPER_INTERVAL_SECS)
    reaper.start()
    app.state.reaper = reaper
    try:
        yield
    finally:
        await reaper.stop()


app = FastAPI(title="Lobby Sessions API", version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(session.router)


@app.get("/")
def health():
    return {"status": "ok", "service": "lobby-sessions", **store.registry.stats()}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=config.HOST, port=config.PORT)
