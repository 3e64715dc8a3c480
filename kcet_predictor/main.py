from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from typing import List
import uvicorn
import json
import os
import logging
from .models import (
    PredictionInput,
    PredictionResponse,
    RankAnalysis,
    CollegeSuggestion,
    CutoffEstimate,
    College,
    TrendResponse
)
from .predictor import (
    InvalidInputError,
    predict_rank,
    get_rank_band,
    get_competition_level,
    get_percentile,
    calculate_percentile,
    get_rank_analysis,
    get_rank_gap_analysis,
    get_college_suggestions,
    get_cutoff_estimates
)
from .utils import load_colleges, find_college, get_trend_frame, build_trend_figure

# Configure logging
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# FastAPI Application
app = FastAPI(
    title="KCET Rank Predictor",
    description="KCET rank estimation and college suggestions",
    version="1.0.0"
)

# CORS Middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"]
)

# Startup event
@app.on_event("startup")
async def startup_event():
    """Load the college list on startup"""
    colleges = load_colleges()
    logger.info(f"Loaded {len(colleges)} colleges on startup")

@app.post("/api/predict", response_model=PredictionResponse)
async def predict(input: PredictionInput):
    """
    Predict a KCET rank with band analysis and college suggestions

    Args:
        input (PredictionInput): KCET score, PUC score and category

    Returns:
        PredictionResponse: Prediction, rank gap analysis and suggestions
    """
    try:
        prediction = predict_rank(input.exam_score, input.puc_score)
        return PredictionResponse(
            prediction=prediction,
            analysis=get_rank_gap_analysis(prediction.composite),
            suggestion=get_college_suggestions(prediction.medium, input.category),
            summary=get_rank_analysis(prediction.medium)
        )
    except InvalidInputError as e:
        logger.warning(f"Rejected prediction input: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Error in predict endpoint: {e}")
        raise HTTPException(status_code=500, detail=str(e))

@app.get("/api/rank-band")
async def rank_band(rank: int):
    return {"rank": rank, "rank_band": get_rank_band(rank)}

@app.get("/api/competition-level")
async def competition_level(composite: float):
    return {"composite": composite, "competition_level": get_competition_level(composite)}

@app.get("/api/percentile")
async def percentile(composite: float):
    """Coarse percentile range for a composite score"""
    return {"composite": composite, "percentile": get_percentile(composite)}

@app.get("/api/calculate-percentile")
async def precise_percentile(rank: int):
    """Estimated percentile for a rank"""
    return {"rank": rank, "percentile": calculate_percentile(rank)}

@app.get("/api/rank-gap", response_model=RankAnalysis)
async def rank_gap(composite: float):
    return get_rank_gap_analysis(composite)

@app.get("/api/college-suggestions", response_model=CollegeSuggestion)
async def college_suggestions(rank: int, category: str = "general"):
    return get_college_suggestions(rank, category)

@app.get("/api/cutoffs", response_model=List[CutoffEstimate])
async def cutoffs():
    return get_cutoff_estimates()

@app.get("/api/trends", response_model=TrendResponse)
async def trends():
    """
    Historical closing-rank trend with chart data

    Returns:
        Dict containing trend rows and visualization data
    """
    try:
        fig = build_trend_figure()
        return {
            "trends": get_trend_frame().to_dict(orient='records'),
            "plot_data": json.loads(fig.to_json()) if fig else None
        }
    except Exception as e:
        logger.error(f"Error in trends endpoint: {e}")
        raise HTTPException(status_code=500, detail=str(e))

@app.get("/api/colleges", response_model=List[College])
async def colleges():
    return load_colleges()

@app.get("/api/colleges/{code}", response_model=College)
async def college_detail(code: str):
    """
    Retrieve a college by its KCET code

    Args:
        code (str): KCET college code

    Returns:
        College record
    """
    college = find_college(code)
    if college is None:
        raise HTTPException(status_code=404, detail="College not found")
    return college

# Health check endpoint
@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy"}

if __name__ == "__main__":
    uvicorn.run(
        "kcet_predictor.main:app",
        host="0.0.0.0",
        port=int(os.getenv("PORT", 8000)),
        reload=True
    )
