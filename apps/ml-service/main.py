from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from core.config import get_config
from core.errors import AnalysisError
from core.log import get_logger
from routes.analyze import router as analyze_router

logger = get_logger('face_harmony.main')
for name in ('core', 'routes'):
  get_logger(name)
config = get_config()

app = FastAPI(title='Face Harmony ML service')

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.server.cors_origins,
    allow_methods=['*'],
    allow_headers=['*']
)

@app.exception_handler(AnalysisError)
async def analysis_error_handler(request: Request, exc: AnalysisError):
  return JSONResponse(status_code=422, content=exc.to_dict())

@app.get("/")
def health():
    return {"msg": "Face Harmony ML service running"}

app.include_router(analyze_router)

logger.info('service ready (epsilon=%g, include_features=%s)',
            config.analysis.epsilon, config.analysis.include_features)
