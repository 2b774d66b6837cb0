import logging
from dataclasses import dataclass, asdict
import numpy as np
from core import landmarks as lm
from core.errors import DegenerateGeometry

logger = logging.getLogger(__name__)

DEFAULT_EPS = 1e-6


@dataclass(frozen=True)
class FeatureSet:
  jaw_ratio: float
  cheekbone_ratio: float
  # pixel units, outer corner higher is positive
  canthal_tilt: float
  midface_ratio: float
  # pixel units
  eye_height_asymmetry: float

  def to_dict(self, ndigits=None):
    out = asdict(self)
    if ndigits is not None:
      out = {k: round(v, ndigits) for k, v in out.items()}
    return out


def _nonzero(name, value, eps):
  if not np.isfinite(value) or abs(value) <= eps:
    raise DegenerateGeometry(name, float(value))
  return value

def _check_spread(pts, eps):
  # all points coincident or on one line
  centered = pts - pts.mean(axis=0)
  if not np.all(np.isfinite(centered)):
    raise DegenerateGeometry('landmark spread')
  try:
    rank = np.linalg.matrix_rank(centered, tol=eps)
  except np.linalg.LinAlgError:
    raise DegenerateGeometry('landmark spread')
  if rank < 2:
    raise DegenerateGeometry('landmark spread')

def extract_features(landmarks, eps=DEFAULT_EPS):
  pts = lm.to_points(landmarks)
  _check_spread(pts, eps)

  def x(i): return float(pts[i, 0])
  def y(i): return float(pts[i, 1])

  # jaw: bigonial over bizygomatic width
  bigonial = abs(x(lm.GONION_RIGHT) - x(lm.GONION_LEFT))
  bizygomatic = _nonzero('bizygomatic width', abs(x(lm.JAW_RIGHT) - x(lm.JAW_LEFT)), eps)
  jaw_ratio = bigonial / bizygomatic

  # cheekbones: cheek height above nose tip over chin-to-brow height
  nose_y = y(lm.NOSE_TIP)
  cheek_h = ((nose_y - y(lm.CHEEK_LEFT)) + (nose_y - y(lm.CHEEK_RIGHT))) / 2.0
  face_h = _nonzero('face height', y(lm.CHIN) - (y(lm.BROW_LEFT_MID) + y(lm.BROW_RIGHT_MID)) / 2.0, eps)
  cheekbone_ratio = cheek_h / face_h

  # canthal tilt: inner.y - outer.y, y grows downward
  left_tilt = y(lm.LEFT_EYE_INNER) - y(lm.LEFT_EYE_OUTER)
  right_tilt = y(lm.RIGHT_EYE_INNER) - y(lm.RIGHT_EYE_OUTER)
  canthal_tilt = (left_tilt + right_tilt) / 2.0

  # midface: ipd over pupil line to mouth
  left_pupil = lm.centroid(pts, lm.LEFT_PUPIL_RING)
  right_pupil = lm.centroid(pts, lm.RIGHT_PUPIL_RING)
  ipd = float(np.hypot(*(right_pupil - left_pupil)))
  pupil_y = (left_pupil[1] + right_pupil[1]) / 2.0
  midface_h = _nonzero('midface height', abs(y(lm.MOUTH_UPPER_INNER) - pupil_y), eps)
  midface_ratio = ipd / midface_h

  eye_height_asymmetry = float(abs(left_pupil[1] - right_pupil[1]))

  ratios = {
    'jaw_ratio': jaw_ratio,
    'cheekbone_ratio': cheekbone_ratio,
    'canthal_tilt': canthal_tilt,
    'midface_ratio': midface_ratio,
    'eye_height_asymmetry': eye_height_asymmetry,
  }
  for name, value in ratios.items():
    if not np.isfinite(value):
      raise DegenerateGeometry(name.replace('_', ' '))

  feats = FeatureSet(**{k: float(v) for k, v in ratios.items()})
  logger.debug('features jaw=%.3f cheek=%.3f tilt=%.3f midface=%.3f asym=%.3f',
               feats.jaw_ratio, feats.cheekbone_ratio, feats.canthal_tilt,
               feats.midface_ratio, feats.eye_height_asymmetry)
  return feats
