class AnalysisError(Exception):
  code = 'analysis_error'

  def __init__(self, detail):
    super().__init__(detail)
    self.detail = detail

  def to_dict(self):
    return {'error': self.code, 'detail': self.detail}


class InvalidLandmarkInput(AnalysisError):
  """Landmark set does not follow the 68-point convention."""
  code = 'invalid_landmarks'

  def __init__(self, detail, count=None):
    super().__init__(detail)
    self.count = count

  def to_dict(self):
    out = super().to_dict()
    if self.count is not None:
      out['count'] = self.count
    return out


class DegenerateGeometry(AnalysisError):
  """Face geometry could not be evaluated (zero span or collapsed points)."""
  code = 'degenerate_geometry'

  def __init__(self, measurement, value=None):
    detail = f'face geometry could not be evaluated: {measurement} is degenerate'
    if value is not None:
      detail += f' ({value:.6g})'
    super().__init__(detail)
    self.measurement = measurement
