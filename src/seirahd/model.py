"""
===========================================================
model.py
Author: seirahd contributors
Last Updated: 2026-10-19
===========================================================
SEIR(+AHD) Model

Deterministic SEIR model extended with asymptomatic (A),
hospitalized (H) and deceased (D) compartments, plus a
cumulative infectious counter (C).

Model Structure:
    S -> E -> I -> H
         |    |    |
         v    v    v
         A -> R / D

Compartments:
    S: Susceptible
    E: Exposed (infected but not yet infectious)
    I: Symptomatic infectious
    A: Asymptomatic infectious
    H: Hospitalized (still infectious)
    R: Recovered
    D: Deaths (cumulative)
    C: Cumulative infectious (E -> I/A flow, bookkeeping only)

The right-hand side lives in rhs.py; this module wraps it
with scipy's solve_ivp and summarizes the trajectory.
-----------------------------------------------------------
License: MIT
===========================================================
"""

from __future__ import annotations
import numpy as np
import pandas as pd
import warnings
from scipy.integrate import solve_ivp
from typing import Dict, Optional, Tuple

from .parameters import SEIRAHDParams
from .rhs import COMPARTMENTS, seirahd_rhs


class SEIRAHDModel:
    """
    SEIR(+AHD) compartmental model.

    Parameters:
    params : SEIRAHDParams
        Parameter object; validated on construction and again on
        every simulate(), so later edits to it take effect.
    """

    def __init__(self, params: Optional[SEIRAHDParams] = None):
        self.params = params if params is not None else SEIRAHDParams()
        self.params.validate()

        # store simulation results
        self.results = None
        self.time = None

    @property
    def N0(self) -> float:
        return float(self.params.N0)

    def initial_conditions(
            self,
            E0: float = 0,
            I0: float = 1,
            A0: float = 0,
            H0: float = 0,
            R0_init: float = 0,
            D0: float = 0
    ) -> np.ndarray:
        """Set initial conditions for the model.

        Susceptibles take up the rest of the population. Individuals
        already infectious at t0 (I0 + A0 + H0) are counted in C.

        Returns:
            y0: np.ndarray. Initial values for [S, E, I, A, H, R, D, C]
        """
        seeds = np.array([E0, I0, A0, H0, R0_init, D0], dtype=float)
        if np.any(seeds < 0):
            raise ValueError("initial compartment sizes must be non-negative")
        if seeds.sum() > self.N0:
            raise ValueError(
                f"seeded compartments ({seeds.sum():.0f}) exceed population size {self.N0:.0f}")

        S0 = self.N0 - seeds.sum()
        C0 = I0 + A0 + H0
        return np.array([S0, E0, I0, A0, H0, R0_init, D0, C0], dtype=float)

    def derivatives(self, t: float, y: np.ndarray) -> np.ndarray:
        """Derivatives [dS, dE, dI, dA, dH, dR, dD, dC] at state y"""
        return seirahd_rhs(t, y, self.params.to_array())

    def _state_from_dict(self, initial_conditions: Dict[str, float]) -> np.ndarray:
        unknown = set(initial_conditions) - set(COMPARTMENTS)
        if unknown:
            raise ValueError(f"unknown compartments: {sorted(unknown)}")

        y0 = np.array([float(initial_conditions.get(c, 0.0)) for c in COMPARTMENTS])
        if 'S' not in initial_conditions:
            y0[0] = self.N0 - y0[1:7].sum()
        if 'C' not in initial_conditions:
            y0[7] = y0[2] + y0[3] + y0[4]

        # validate initial conditions
        if not np.isclose(y0[:7].sum(), self.N0):
            warnings.warn(
                f"Initial conditions sum to {y0[:7].sum():.0f}, "
                f"but population is {self.N0:.0f}. Adjusting S."
            )
            y0[0] = self.N0 - y0[1:7].sum()
        if np.any(y0 < 0):
            raise ValueError("initial conditions must be non-negative")
        return y0

    def simulate(
            self,
            initial_conditions: Optional[Dict[str, float]] = None,
            t_span: Tuple[float, float] = (0.0, 180.0),
            t_eval: Optional[np.ndarray] = None,
            method: str = 'RK45'
    ) -> Dict[str, np.ndarray]:
        """Run the SEIR(+AHD) simulation.

        Parameters:
        initial_conditions: dict, optional. {'S': s0, 'E': e0, 'I': i0, ...};
            missing compartments default to 0 (S to the remainder of N0).
            If None, one symptomatic case is seeded.
        t_span: tuple. Time span for integration (t_start, t_end)
        t_eval: array-like, optional. Times at which to store the solution.
            Defaults to daily points over t_span.
        method: str, default='RK45'. ODE solver method (RK45, RK23, DOP853, Radau, BDF, LSODA)

        Returns:
        results: dict. Keys 'time', one per compartment, 'N', 'incidence', 'prevalence'
        """
        param = self.params.validate()

        if initial_conditions is None:
            y0 = self.initial_conditions()
        else:
            y0 = self._state_from_dict(initial_conditions)

        if t_eval is None:
            t_eval = np.arange(t_span[0], t_span[1] + 1.0, 1.0)
            t_eval = t_eval[t_eval <= t_span[1]]

        solution = solve_ivp(
            fun=seirahd_rhs,
            t_span=t_span,
            y0=y0,
            method=method,
            t_eval=t_eval,
            max_step=1.0,
            rtol=1e-6,
            atol=1e-8,
            args=(param,)
        )

        if not solution.success:
            raise RuntimeError(f"ODE solver failed: {solution.message}")

        S, E, I, A, H, R, D, C = solution.y
        N = self.N0 - D
        infectious = I + A + H

        self.results = {'time': solution.t}
        self.results.update(dict(zip(COMPARTMENTS, solution.y)))
        self.results.update({
            'N': N,
            'incidence': param[1] * S * infectious / N,
            'prevalence': infectious / N,
        })
        self.time = solution.t

        return self.results

    def calculate_outcomes(self) -> Dict[str, float]:
        """Calculate epidemic outcomes from simulation results

        Returns:
        outcomes: dict. Total infections, deaths, hospital peak, etc.
        """
        if self.results is None:
            raise ValueError("Must run simulate() before calculating outcomes")

        infectious = self.results['I'] + self.results['A'] + self.results['H']
        peak_idx = int(np.argmax(infectious))
        hosp_idx = int(np.argmax(self.results['H']))
        total_infections = float(self.results['C'][-1])

        return {
            'total_infections': total_infections,
            'total_deaths': float(self.results['D'][-1]),
            'total_recovered': float(self.results['R'][-1]),
            'peak_infectious': float(infectious[peak_idx]),
            'peak_day': float(self.time[peak_idx]),
            'peak_hospitalized': float(self.results['H'][hosp_idx]),
            'peak_hospitalized_day': float(self.time[hosp_idx]),
            'attack_rate': total_infections / self.N0,
        }

    def to_frame(self) -> pd.DataFrame:
        """Stored results as a tidy DataFrame, one row per time point"""
        if self.results is None:
            raise ValueError("Must run simulate() before building a DataFrame")
        return pd.DataFrame(self.results)

    def calculate_r0(self) -> float:
        return self.params.R0

    def print_summary(self):
        """Print summary of simulation results."""
        if self.results is None:
            raise ValueError("Must run simulate() before printing summary")

        outcomes = self.calculate_outcomes()

        print("SEIR(+AHD) SIMULATION RESULTS:")
        print(f"Simulation time: {self.time[-1]:.0f} days")
        print(f"Population size: {self.N0:,.0f}")
        print(f"R₀: {self.calculate_r0():.2f}")
        print(f"\n--- EPIDEMIC OUTCOMES ---")
        print(f"Total infections: {outcomes['total_infections']:,.0f}")
        print(f"Attack rate: {outcomes['attack_rate'] * 100:.2f}%")
        print(f"Total deaths: {outcomes['total_deaths']:,.0f}")
        print(f"Peak infectious: {outcomes['peak_infectious']:,.0f} (day {outcomes['peak_day']:.0f})")
        print(f"Peak hospitalized: {outcomes['peak_hospitalized']:,.0f} "
              f"(day {outcomes['peak_hospitalized_day']:.0f})")
