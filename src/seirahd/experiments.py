"""
===========================================================
experiments.py
Author: seirahd contributors
Last Updated: 2026-10-19
===========================================================

Description:
    Parameter sweeps for the SEIR(+AHD) model: grid search
    over (beta, rho), tidy results as a DataFrame, and a pivot
    helper for heatmaps/contours.

Example Usage:
    from seirahd.experiments import grid_sweep
    df = grid_sweep(betas, rhos, SEIRAHDParams(N0=10000))
    plot_sweep_heatmap(df, x='beta', y='rho', value='peak_hospitalized')

Notes:
    - Every other parameter is taken from base_params.
-----------------------------------------------------------
License: MIT
===========================================================
"""

import numpy as np
import pandas as pd
from dataclasses import replace
from typing import Dict, Optional, Tuple

from .model import SEIRAHDModel
from .parameters import SEIRAHDParams


def _summarize_one(params: SEIRAHDParams, initial_conditions, t_span) -> Dict[str, float]:
    """Run one simulation and return a dict of summary statistics"""
    model = SEIRAHDModel(params)
    model.simulate(initial_conditions=initial_conditions, t_span=t_span)
    outcomes = model.calculate_outcomes()

    return {
        "beta": float(params.beta),
        "rho": float(params.rho),
        "R0": float(params.R0),
        "peak_day": outcomes["peak_day"],
        "peak_infectious": outcomes["peak_infectious"],
        "peak_hospitalized": outcomes["peak_hospitalized"],
        "total_deaths": outcomes["total_deaths"],
        "attack_rate": outcomes["attack_rate"],
    }


def grid_sweep(
    betas,
    rhos,
    base_params: Optional[SEIRAHDParams] = None,
    initial_conditions: Optional[Dict[str, float]] = None,
    t_span: Tuple[float, float] = (0.0, 180.0)) -> pd.DataFrame:
    """
    Evaluate the SEIR(+AHD) model across a grid of (beta, rho) values.
    Returns a tidy pandas DataFrame with one row per parameter combo
    """
    base_params = base_params if base_params is not None else SEIRAHDParams()
    records = []
    for b in betas:
        for r in rhos:
            params = replace(base_params, beta=float(b), rho=float(r))
            records.append(_summarize_one(params, initial_conditions, t_span))
    df = pd.DataFrame.from_records(records)
    return df.sort_values(["beta", "rho"]).reset_index(drop=True)


def pivot_for_plot(df: pd.DataFrame, x: str, y: str, value: str):
    """Pivot a DataFrame to 2D arrays for plotting (heatmaps/contour)
    Return X_grid, Y_grid, Z_values
    """
    sub = df[[x, y, value]].drop_duplicates(subset=[x, y])
    table = sub.pivot(index=y, columns=x, values=value).sort_index().sort_index(axis=1)
    X, Y = np.meshgrid(table.columns.to_numpy(dtype=float), table.index.to_numpy(dtype=float))
    return X, Y, table.to_numpy(dtype=float)
