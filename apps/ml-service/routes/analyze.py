from typing import Any, List, Optional
from fastapi import APIRouter, WebSocket, WebSocketDisconnect
from pydantic import BaseModel
import json
from core.config import get_config
from core.errors import AnalysisError
from core.scoring import analyze, score_tier

router = APIRouter()


class AnalyzeRequest(BaseModel):
  # points are validated by the engine so count errors stay typed
  landmarks: List[Any]
  include_features: Optional[bool] = None


def run_analysis(landmarks, include_features=None):
  cfg = get_config().analysis
  if include_features is None:
    include_features = cfg.include_features
  result = analyze(landmarks, eps=cfg.epsilon)
  out = result.to_dict(include_features=include_features)
  out['tier'] = score_tier(result.score)
  return out

@router.post('/analyze')
def analyze_landmarks(req: AnalyzeRequest):
  return run_analysis(req.landmarks, req.include_features)

@router.websocket('/ws/analyze')
async def ws_analyze(ws: WebSocket):
  await ws.accept()
  try:
    while True:
      msg = await ws.receive()
      if msg.get('type') == 'websocket.disconnect':
        break
      if msg.get('text') is None:
        await ws.send_text(json.dumps({'error': 'expected JSON landmarks'}))
        continue
      try:
        p = json.loads(msg['text'])
      except ValueError:
        await ws.send_text(json.dumps({'error': 'invalid json'}))
        continue
      # bare point list or {'landmarks': [...], 'include_features': bool}
      if isinstance(p, dict):
        lms, inc = p.get('landmarks'), p.get('include_features')
      else:
        lms, inc = p, None
      try:
        out = run_analysis(lms, inc)
      except AnalysisError as e:
        out = e.to_dict()
      await ws.send_text(json.dumps(out))
  except WebSocketDisconnect:
    pass
