"""
===========================================================
plotting.py
Author: seirahd contributors
Last Updated: 2026-10-19
===========================================================
Visualization functions for SEIR(+AHD) simulations and
parameter sweeps. Functions return the Figure/Axes and leave
showing or saving to the caller (except save_path).
-----------------------------------------------------------
License: MIT
===========================================================
"""
import numpy as np
import pandas as pd
import matplotlib.pyplot as plt
from typing import Dict, Optional
from matplotlib.axes import Axes
from matplotlib.figure import Figure

from .experiments import pivot_for_plot

COLORS = {
    'S': 'blue',
    'E': 'orange',
    'I': 'red',
    'A': 'salmon',
    'H': 'purple',
    'R': 'green',
    'D': 'black',
    'C': 'darkblue',
}

LABELS = {
    'S': 'Susceptible',
    'E': 'Exposed',
    'I': 'Symptomatic',
    'A': 'Asymptomatic',
    'H': 'Hospitalized',
    'R': 'Recovered',
    'D': 'Deceased',
    'C': 'Cumulative infectious',
}


def plot_dynamics(results: Dict[str, np.ndarray],
                  save_path: Optional[str] = None,
                  title: Optional[str] = None) -> Figure:
    """
    Plot epidemic dynamics over time.

    Parameters
    ----------
    results : dict
        Output of SEIRAHDModel.simulate()
    save_path : str, optional
        If provided, save figure to this path
    title : str, optional
        Figure title

    Returns
    -------
    fig : matplotlib.figure.Figure
    """
    t = results['time']
    fig, axes = plt.subplots(2, 2, figsize=(14, 10))

    # Plot 1: All compartments
    ax = axes[0, 0]
    for c in ('S', 'E', 'I', 'A', 'H', 'R', 'D'):
        ax.plot(t, results[c], label=LABELS[c], color=COLORS[c], linewidth=2)
    ax.set_xlabel('Time (days)', fontsize=12)
    ax.set_ylabel('Number of individuals', fontsize=12)
    ax.set_title('SEIR(+AHD) Compartment Dynamics', fontsize=14, fontweight='bold')
    ax.legend(loc='best', frameon=True, fontsize=10)
    ax.grid(True, alpha=0.3)

    # Plot 2: Infectious classes
    ax = axes[0, 1]
    for c in ('I', 'A', 'H'):
        ax.plot(t, results[c], label=LABELS[c], color=COLORS[c], linewidth=2)
    ax.set_xlabel('Time (days)', fontsize=12)
    ax.set_ylabel('Number of individuals', fontsize=12)
    ax.set_title('Infectious Compartments', fontsize=14, fontweight='bold')
    ax.legend(loc='best', frameon=True, fontsize=10)
    ax.grid(True, alpha=0.3)

    # Plot 3: Deaths
    ax = axes[1, 0]
    ax.plot(t, results['D'], color=COLORS['D'], linewidth=2, linestyle='--')
    ax.set_xlabel('Time (days)', fontsize=12)
    ax.set_ylabel('Deaths', fontsize=12)
    ax.set_title('Cumulative Deaths', fontsize=14, fontweight='bold')
    ax.grid(True, alpha=0.3)

    # Plot 4: Cumulative infections
    ax = axes[1, 1]
    ax.plot(t, results['C'], color=COLORS['C'], linewidth=2)
    ax.set_xlabel('Time (days)', fontsize=12)
    ax.set_ylabel('Cumulative infectious', fontsize=12)
    ax.set_title('Cumulative Infections', fontsize=14, fontweight='bold')
    ax.grid(True, alpha=0.3)

    if title:
        fig.suptitle(title, fontsize=16)
    fig.tight_layout()

    if save_path:
        fig.savefig(save_path, dpi=300, bbox_inches='tight')
        print(f"Figure saved to {save_path}")

    return fig


def plot_sweep_heatmap(df: pd.DataFrame, x: str, y: str, value: str,
                       ax: Optional[Axes] = None,
                       title: Optional[str] = None) -> Axes:
    """Heatmap of a sweep summary metric (e.g. peak_hospitalized, attack_rate)"""
    X, Y, Z = pivot_for_plot(df, x=x, y=y, value=value)
    if ax is None:
        fig, ax = plt.subplots(figsize=(8, 6))

    # imshow expects [rows, cols] -> (y, x)
    extent = [X.min(), X.max(), Y.min(), Y.max()]
    im = ax.imshow(Z, origin='lower', aspect='auto', extent=extent)
    cbar = ax.figure.colorbar(im, ax=ax)
    cbar.set_label(value.replace("_", " ").title())
    ax.set_xlabel(x)
    ax.set_ylabel(y)
    if title:
        ax.set_title(title)
    return ax
