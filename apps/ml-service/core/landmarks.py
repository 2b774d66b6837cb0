import math
import numpy as np
from core.errors import InvalidLandmarkInput

# 68-point scheme: jaw 0-16, brows 17-26, nose 27-35, eyes 36-47, mouth 48-67
NUM_LANDMARKS = 68

JAW_LEFT = 0
CHEEK_LEFT = 1
GONION_LEFT = 4
CHIN = 8
GONION_RIGHT = 12
CHEEK_RIGHT = 15
JAW_RIGHT = 16

BROW_LEFT_MID = 19
BROW_RIGHT_MID = 24

NOSE_TIP = 30

LEFT_EYE_OUTER = 36
LEFT_EYE_UPPER = (37, 38)
LEFT_EYE_INNER = 39
LEFT_EYE_LOWER = (40, 41)
RIGHT_EYE_INNER = 42
RIGHT_EYE_UPPER = (43, 44)
RIGHT_EYE_OUTER = 45
RIGHT_EYE_LOWER = (46, 47)

MOUTH_UPPER_INNER = 62

LEFT_PUPIL_RING = LEFT_EYE_UPPER + LEFT_EYE_LOWER
RIGHT_PUPIL_RING = RIGHT_EYE_UPPER + RIGHT_EYE_LOWER

def _coord(pt, axis, i):
  if isinstance(pt, dict):
    if axis not in pt:
      raise InvalidLandmarkInput(f'landmark {i} is missing "{axis}"', count=NUM_LANDMARKS)
    v = pt[axis]
  else:
    try:
      v = pt[0 if axis == 'x' else 1]
    except (IndexError, TypeError, KeyError):
      raise InvalidLandmarkInput(f'landmark {i} is not an (x, y) pair', count=NUM_LANDMARKS)
  if isinstance(v, bool):
    raise InvalidLandmarkInput(f'landmark {i} has a non-numeric {axis}', count=NUM_LANDMARKS)
  try:
    f = float(v)
  except (TypeError, ValueError):
    raise InvalidLandmarkInput(f'landmark {i} has a non-numeric {axis}', count=NUM_LANDMARKS)
  if not math.isfinite(f):
    raise InvalidLandmarkInput(f'landmark {i} has a non-finite {axis}', count=NUM_LANDMARKS)
  return f

def to_points(landmarks):
  """Validate a 68-point landmark set and return it as a (68, 2) float array.

  Accepts (x, y) pairs, {'x', 'y'} dicts (extra keys such as 'z' are ignored)
  or an array of shape (68, 2).
  """
  if landmarks is None:
    raise InvalidLandmarkInput('no landmarks supplied', count=0)
  if isinstance(landmarks, np.ndarray):
    if landmarks.ndim != 2 or landmarks.shape[1] < 2:
      raise InvalidLandmarkInput(f'expected shape ({NUM_LANDMARKS}, 2), got {landmarks.shape}',
                                 count=int(landmarks.shape[0]) if landmarks.ndim else 0)
    landmarks = landmarks[:, :2].tolist()
  if isinstance(landmarks, (str, bytes, dict)):
    raise InvalidLandmarkInput('landmarks must be a sequence of points')
  try:
    n = len(landmarks)
  except TypeError:
    raise InvalidLandmarkInput('landmarks must be a sequence of points')
  if n != NUM_LANDMARKS:
    raise InvalidLandmarkInput(f'expected {NUM_LANDMARKS} landmarks, got {n}', count=n)

  pts = np.empty((NUM_LANDMARKS, 2), dtype=np.float64)
  for i, pt in enumerate(landmarks):
    if pt is None:
      raise InvalidLandmarkInput(f'landmark {i} is missing', count=n)
    if isinstance(pt, (str, bytes)):
      raise InvalidLandmarkInput(f'landmark {i} is not an (x, y) pair', count=n)
    pts[i, 0] = _coord(pt, 'x', i)
    pts[i, 1] = _coord(pt, 'y', i)
  return pts

def centroid(pts, idxs):
  return pts[list(idxs)].mean(axis=0)
