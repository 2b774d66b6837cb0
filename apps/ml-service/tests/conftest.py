import math
import pytest


def build_face(jaw=0.9, cheek=0.31, tilt=3.5, midface=1.0, asym=1.0):
  """Synthetic 68-point face whose ratios land on the requested values."""
  pts = [[50.0 + (i * 37) % 100, 120.0 + (i * 53) % 150] for i in range(68)]

  # bizygomatic width 200, bigonial width 200 * jaw
  pts[0] = [0.0, 200.0]
  pts[16] = [200.0, 200.0]
  pts[4] = [100.0 - jaw * 100.0, 300.0]
  pts[12] = [100.0 + jaw * 100.0, 300.0]

  # face height 200 (brows at 100, chin at 300), nose tip at 220
  pts[19] = [70.0, 100.0]
  pts[24] = [130.0, 100.0]
  pts[8] = [100.0, 300.0]
  pts[30] = [100.0, 220.0]
  pts[1] = [5.0, 220.0 - cheek * 200.0]
  pts[15] = [195.0, 220.0 - cheek * 200.0]

  # eye corners: inner at y=150, outer raised by tilt
  pts[36] = [55.0, 150.0 - tilt]
  pts[39] = [85.0, 150.0]
  pts[42] = [115.0, 150.0]
  pts[45] = [145.0, 150.0 - tilt]

  # pupil rings centred on (70, 150) and (130, 150 + asym)
  ly, ry = 150.0, 150.0 + asym
  for i, (dx, dy) in zip((37, 38, 40, 41), ((-5, -4), (5, -4), (5, 4), (-5, 4))):
    pts[i] = [70.0 + dx, ly + dy]
  for i, (dx, dy) in zip((43, 44, 46, 47), ((-5, -4), (5, -4), (5, 4), (-5, 4))):
    pts[i] = [130.0 + dx, ry + dy]

  ipd = math.hypot(60.0, asym)
  pts[62] = [100.0, (ly + ry) / 2.0 + ipd / midface]
  return pts


@pytest.fixture
def make_face():
  return build_face


@pytest.fixture
def face():
  return build_face()
