import pandas as pd
import plotly.graph_objs as go
import plotly.express as px
import logging
from typing import List, Optional
import os

from .constants import TREND_DATA
from .models import College

logger = logging.getLogger(__name__)

# Global DataFrame to cache the college list
COLLEGE_DATA = None

def get_data_dir() -> str:
    """Directory holding the bundled data files, overridable via KCET_DATA_DIR"""
    default_dir = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'data')
    return os.getenv('KCET_DATA_DIR', default_dir)

def clean_college_names(names: pd.Series) -> pd.Series:
    """Strip the 'E:' prefix, trailing colons and repeated whitespace"""
    return (
        names.astype(str)
        .str.replace(r'^E:\s*', '', regex=True)
        .str.replace(r'\s*:\s*$', '', regex=True)
        .str.replace(r'\s+', ' ', regex=True)
        .str.strip()
    )

def load_college_data() -> pd.DataFrame:
    """
    Load the KCET college list from CSV

    Returns:
        pd.DataFrame: College codes and cleaned names
    """
    global COLLEGE_DATA
    try:
        csv_path = os.path.join(get_data_dir(), 'kcet_colleges.csv')

        logger.info(f"Attempting to load CSV from: {csv_path}")

        if not os.path.exists(csv_path):
            logger.error(f"CSV file not found at: {csv_path}")
            raise FileNotFoundError(f"CSV file not found at: {csv_path}")

        df = pd.read_csv(csv_path, dtype=str)

        df = df.dropna(subset=['code', 'name'])
        df['code'] = df['code'].str.strip().str.upper()
        df['name'] = clean_college_names(df['name'])

        COLLEGE_DATA = df
        logger.info(f"College list loaded successfully. Total rows: {len(df)}")
        return df

    except Exception as e:
        logger.error(f"Error in load_college_data: {e}")
        return pd.DataFrame(columns=['code', 'name'])

def reset_cache() -> None:
    global COLLEGE_DATA
    COLLEGE_DATA = None

def load_colleges() -> List[College]:
    """
    Retrieve the college list as records

    Returns:
        List[College]: Colleges in file order, empty if the list is unavailable
    """
    global COLLEGE_DATA
    if COLLEGE_DATA is None or COLLEGE_DATA.empty:
        COLLEGE_DATA = load_college_data()

    return [
        College(code=row['code'], name=row['name'])
        for row in COLLEGE_DATA.to_dict(orient='records')
    ]

def find_college(code: str) -> Optional[College]:
    """Look up a college by its KCET code (case-insensitive)"""
    code = code.strip().upper()
    for college in load_colleges():
        if college.code == code:
            return college
    return None

def get_trend_frame() -> pd.DataFrame:
    """
    Historical closing ranks per checkpoint, one column per year

    Returns:
        pd.DataFrame: 'checkpoint' column followed by a column per year
    """
    df = pd.DataFrame({str(year): list(ranks) for year, ranks in TREND_DATA.items()})
    df.insert(0, 'checkpoint', range(1, len(df) + 1))
    return df

def build_trend_figure() -> Optional[go.Figure]:
    """
    Line chart of the historical rank trend

    Returns:
        Optional[go.Figure]: Plotly figure, None if rendering fails
    """
    try:
        df = get_trend_frame().melt(
            id_vars='checkpoint', var_name='Year', value_name='Closing Rank'
        )
        fig = px.line(
            df,
            x='checkpoint',
            y='Closing Rank',
            color='Year',
            markers=True,
            title='KCET Closing Rank Trend'
        )
        fig.update_layout(
            xaxis_title="Checkpoint",
            yaxis_title="Closing Rank"
        )
        return fig
    except Exception as e:
        logger.error(f"Error in build_trend_figure: {e}")
        return None
