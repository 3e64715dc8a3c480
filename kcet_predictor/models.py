from typing import List, Optional

from pydantic import BaseModel, Field

class PredictionInput(BaseModel):
    exam_score: float = Field(..., description="KCET raw score (0-180)")
    puc_score: float = Field(..., description="PUC percentage (0-100)")
    category: str = Field("general", description="Category (e.g., general, obc, sc, st)")

class RankPrediction(BaseModel):
    low: int = Field(..., description="Optimistic rank estimate")
    medium: int = Field(..., description="Expected rank")
    high: int = Field(..., description="Pessimistic rank estimate")
    composite: float = Field(..., description="Weighted composite score (0-100)")
    percentile: str
    rank_band: str
    competition_level: str

class RankAnalysis(BaseModel):
    rank_gap: str
    candidates_per_percent: str
    competition_level: str
    improvement_potential: str

class CollegeSuggestion(BaseModel):
    name: str
    branch: str

class CutoffEstimate(BaseModel):
    target_rank: str
    expected_aggregate: str

class College(BaseModel):
    code: str
    name: str

class PredictionResponse(BaseModel):
    prediction: RankPrediction
    analysis: RankAnalysis
    suggestion: CollegeSuggestion
    summary: str

class TrendResponse(BaseModel):
    trends: List[dict]
    plot_data: Optional[dict] = None
