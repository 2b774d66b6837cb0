import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Tuple
from core.errors import AnalysisError
from core.ratios import DEFAULT_EPS, FeatureSet, extract_features

logger = logging.getLogger(__name__)

BASELINE = 50
SCORE_MIN = 60
SCORE_MAX = 98

ADVICE_SOFT_JAW = 'Jawline is soft. Lower body fat or mewing recommended.'
ADVICE_NEGATIVE_TILT = 'Negative canthal tilt detected. Maximize sleep and hydration.'
ADVICE_LONG_MIDFACE = 'Midface appears elongated. Consider hairstyle to add width.'
ADVICE_ASYMMETRY = 'Slight facial asymmetry detected (normal).'
ADVICE_HARMONY = 'Great facial harmony detected.'

TIERS = [(90, 'GOD TIER'), (80, 'MODEL TIER'), (70, 'ABOVE AVERAGE')]


@dataclass(frozen=True)
class AnalysisResult:
  score: int
  traits: Mapping[str, str]
  advice: Tuple[str, ...]
  # reserved, not computed by the heuristic
  potential: Optional[int] = None
  features: Optional[FeatureSet] = None

  def __post_init__(self):
    # read-only views
    object.__setattr__(self, 'traits', MappingProxyType(dict(self.traits)))
    object.__setattr__(self, 'advice', tuple(self.advice))

  def __hash__(self):
    return hash((self.score, tuple(sorted(self.traits.items())), self.advice, self.potential, self.features))

  def to_dict(self, include_features=False):
    out = {
      'score': self.score,
      'potential': self.potential,
      'traits': dict(self.traits),
      'advice': list(self.advice),
    }
    if include_features and self.features is not None:
      out['features'] = self.features.to_dict(ndigits=3)
    return out


def score_features(f: FeatureSet) -> int:
  """Baseline plus one fixed delta per feature band, clamped to [60, 98].

  Bands use strict comparisons; a value sitting on a threshold falls into the
  lower branch.
  """
  score = BASELINE

  # jaw
  score += 15 if f.jaw_ratio > 0.82 else 5

  # cheekbones
  score += 10 if f.cheekbone_ratio > 0.28 else 5

  # tilt
  if f.canthal_tilt > 2:
    score += 10
  elif f.canthal_tilt < -2:
    score -= 5
  else:
    score += 5

  # midface
  score += 10 if f.midface_ratio > 0.95 else 2

  # symmetry (pupil heights)
  if f.eye_height_asymmetry < 4:
    score += 5

  return min(SCORE_MAX, max(SCORE_MIN, int(round(score))))

def label_traits(f: FeatureSet) -> dict:
  # label bands are deliberately not the scoring bands
  if f.jaw_ratio > 0.8:
    jaw = 'Chiseled'
  elif f.jaw_ratio > 0.75:
    jaw = 'Defined'
  else:
    jaw = 'Soft'
  cheek = 'High' if f.cheekbone_ratio > 0.3 else 'Average'
  if f.canthal_tilt > 3:
    eyes = 'Hunter'
  elif f.canthal_tilt < -1:
    eyes = 'Prey'
  else:
    eyes = 'Neutral'
  return {'jawline': jaw, 'cheekbones': cheek, 'eyes': eyes}

def generate_advice(f: FeatureSet) -> Tuple[str, ...]:
  advice = []
  if f.jaw_ratio < 0.76:
    advice.append(ADVICE_SOFT_JAW)
  if f.canthal_tilt < -2:
    advice.append(ADVICE_NEGATIVE_TILT)
  if f.midface_ratio < 0.85:
    advice.append(ADVICE_LONG_MIDFACE)
  if f.eye_height_asymmetry >= 4:
    advice.append(ADVICE_ASYMMETRY)
  return tuple(advice) if advice else (ADVICE_HARMONY,)

def score_tier(score):
  for floor, name in TIERS:
    if score >= floor:
      return name
  return 'AVERAGE'

def analyze_features(f: FeatureSet) -> AnalysisResult:
  return AnalysisResult(
    score=score_features(f),
    traits=label_traits(f),
    advice=generate_advice(f),
    features=f,
  )

def analyze(landmarks, eps=DEFAULT_EPS) -> AnalysisResult:
  """Run the full landmark -> features -> score/traits/advice pass.

  Raises InvalidLandmarkInput for a set that is not 68 well-formed points and
  DegenerateGeometry when a ratio would divide by a (near) zero span.
  """
  try:
    feats = extract_features(landmarks, eps=eps)
  except AnalysisError as e:
    logger.warning('rejected landmarks: %s', e.detail)
    raise
  result = analyze_features(feats)
  logger.debug('score=%d traits=%s', result.score, result.traits)
  return result
