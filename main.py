import os
import logging
from dotenv import load_dotenv
load_dotenv()
import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware


from utils.logging_config import setup_logging
from utils.supabase_client import create_supabase_client
from sondeo_core.config import SUPABASE_KEY, SUPABASE_URL
from endpoints.sondeo import router as sondeo_router


setup_logging()
logger = logging.getLogger(__name__)

for key, value in (("SUPABASE_URL", SUPABASE_URL), ("SUPABASE_KEY", SUPABASE_KEY)):
    if not value:
        logger.warning(f"⚠️ Environment variable missing: {key} (historial y contexto desde BD desactivados)")

app = FastAPI(
    title="Sondeos API",
    description="API para sondear temas con contexto de tendencias, noticias, codex y monitoreos",
    version="1.0.0"
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.exception(f"❌ Error no controlado en {request.url.path}")
    return JSONResponse(
        status_code=500,
        content={"detail": f"An unexpected error occurred: {str(exc)}"}
    )

# Supabase client (inyectado a los routers vía app.state)
app.state.supabase = create_supabase_client()

# Routers
app.include_router(sondeo_router)

@app.get("/")
async def root():
    return {"message": "Sondeos API is running 💡"}

if __name__ == "__main__":
    port = int(os.environ.get("PORT", 5050))
    uvicorn.run("main:app", host="0.0.0.0", port=port, reload=False, log_level="info")
