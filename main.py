import asyncio
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, Response

from config import load_settings
from logger import logger
from oracle import Oracle
from page import render_page
from schemas import AskRequest, AskResponse, PricesResponse, Quote, SelectRequest

settings = load_settings()
oracle = Oracle(settings)

# -------------------- Refresh loop --------------------

async def refresh_loop(interval_sec: float):
    """Fetch and render immediately, then once per interval until cancelled."""
    while True:
        try:
            quote = await asyncio.to_thread(oracle.refresh)
            logger.debug(f"Refreshed prices: {quote.status}")
        except Exception:
            logger.exception("Refresh cycle failed")
        await asyncio.sleep(interval_sec)


@asynccontextmanager
async def lifespan(app: FastAPI):
    task = asyncio.create_task(refresh_loop(settings.refresh_interval_sec))
    logger.info(f"Refresh loop started, every {settings.refresh_interval_sec}s for {', '.join(settings.watchlist)}")
    yield
    task.cancel()
    try:
        await task
    except asyncio.CancelledError:
        pass
    logger.info("Refresh loop stopped")


app = FastAPI(title="x01 AI Oracle API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# -------------------- Routes --------------------
@app.get("/", response_class=HTMLResponse)
def read_root():
    return render_page(oracle.watchlist, settings.refresh_interval_sec)

@app.get("/health")
def health():
    return {
        "status": "ok",
        "selected": oracle.selected,
        "last_update": oracle.fetcher.updated_at.isoformat() if oracle.fetcher.updated_at else None,
    }

@app.get("/api/prices", response_model=PricesResponse)
def prices():
    return PricesResponse(
        watchlist=list(oracle.watchlist),
        prices=oracle.fetcher.snapshot,
        updated_at=oracle.fetcher.updated_at,
    )

@app.get("/api/state", response_model=Quote)
def state():
    return oracle.quote()

@app.post("/api/ask", response_model=AskResponse)
def ask(req: AskRequest):
    try:
        return oracle.ask(req.query, req.current)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

@app.post("/api/select", response_model=Quote)
def select(req: SelectRequest):
    try:
        return oracle.select(req.symbol)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

@app.get("/api/chart.png")
def chart_png():
    return Response(content=oracle.chart_png(), media_type="image/png", headers={"Cache-Control": "no-store"})

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=settings.port)
