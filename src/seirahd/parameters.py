"""
===========================================================
parameters.py
Author: seirahd contributors
Last Updated: 2026-10-19
===========================================================
Model Parameters for the SEIR(+AHD) model

Named parameter set for the SEIR(+AHD) compartmental model,
with conversion to/from the flat vector the right-hand side
expects and a few alternative scenarios for sensitivity runs.

All rates are per day. fE and kappaH are dimensionless
fractions in [0, 1].
-----------------------------------------------------------
License: MIT
===========================================================
"""

from __future__ import annotations
import numpy as np
from dataclasses import dataclass, fields
from typing import Dict, Sequence

from .rhs import PARAMETERS, validate_parameters


@dataclass
class SEIRAHDParams:
    """
    Parameter set for the SEIR(+AHD) model.

    Field order matches the parameter vector
    [N0, beta, alpha, fE, gamma, rho, delta, kappaH].
    """

    # ==================== Population =============================================
    N0: int = 1000          # initial population size (individuals)

    # ==================== Transmission and progression ===========================
    beta: float = 0.5       # transmission rate
    alpha: float = 0.2      # latent rate (1/alpha = latent period)
    fE: float = 0.6         # symptomatic fraction of E -> infectious

    # ==================== Outcomes ================================================
    gamma: float = 0.1      # recovery rate (1/gamma = infectious period)
    rho: float = 0.05       # hospitalization rate of symptomatic cases
    delta: float = 0.01     # death rate
    kappaH: float = 0.3     # mortality factor applied to hospitalized

    def to_array(self) -> np.ndarray:
        """Return the parameters as the flat vector used by seirahd_rhs"""
        return np.array([getattr(self, name) for name in PARAMETERS], dtype=float)

    @classmethod
    def from_array(cls, param: Sequence[float]) -> "SEIRAHDParams":
        """Build a parameter set from a flat vector, validating it first"""
        p = validate_parameters(param)
        values = dict(zip(PARAMETERS, p.tolist()))
        values['N0'] = int(values['N0'])
        return cls(**values)

    def validate(self) -> np.ndarray:
        return validate_parameters(self.to_array())

    def to_dict(self) -> Dict[str, float]:
        """Convert parameters to dictionary for easy inspection."""
        out = {f.name: getattr(self, f.name) for f in fields(self)}
        out['R0'] = self.R0
        return out

    @property
    def R0(self) -> float:
        """
        Basic reproduction number from the next-generation argument.

        A new infection becomes symptomatic with probability fE and
        asymptomatic otherwise; symptomatic cases transmit for
        1/(gamma+rho+delta) days and, with probability rho/(gamma+rho+delta),
        keep transmitting in hospital for 1/(gamma+kappaH*delta) days.
        """
        if self.beta == 0:
            return 0.0

        out_I = self.gamma + self.rho + self.delta
        out_A = self.gamma + self.delta
        out_H = self.gamma + self.kappaH * self.delta

        # a branch with zero weight contributes nothing, even if it never clears
        symptomatic = 0.0
        if self.fE > 0:
            if out_I <= 0:
                return np.inf
            hospital = 0.0
            if self.rho > 0:
                if out_H <= 0:
                    return np.inf
                hospital = self.rho / out_H
            symptomatic = (1.0 / out_I) * (1.0 + hospital)

        asymptomatic = 0.0
        if self.fE < 1:
            if out_A <= 0:
                return np.inf
            asymptomatic = 1.0 / out_A

        return self.beta * (self.fE * symptomatic + (1 - self.fE) * asymptomatic)

    def print_summary(self):
        """Print parameter summary for documentation."""
        print("SEIR(+AHD) MODEL PARAMETERS:")
        print("\n--- POPULATION ---")
        print(f"Initial population (N0): {self.N0:,}")
        print("\n--- TRANSMISSION ---")
        print(f"R₀: {self.R0:.2f}")
        print(f"Transmission rate (β): {self.beta:.3f} per day")
        print(f"Latent period: {1 / self.alpha if self.alpha else np.inf:.1f} days")
        print(f"Symptomatic fraction: {self.fE * 100:.0f}%")
        print("\n--- OUTCOMES ---")
        print(f"Recovery rate (γ): {self.gamma:.3f} per day")
        print(f"Hospitalization rate (ρ): {self.rho:.3f} per day")
        print(f"Death rate (δ): {self.delta:.3f} per day")
        print(f"Hospital mortality factor (κH): {self.kappaH:.2f}")


# Alternative parameter sets for sensitivity analysis
def create_low_transmission_params():
    """Situation where contacts are reduced (beta halved)"""
    return SEIRAHDParams(beta=0.25)


def create_high_transmission_params():
    """Situation where beta is higher"""
    return SEIRAHDParams(beta=0.8)


def create_high_hospitalization_params():
    """Severe variant: more hospitalizations, higher mortality in hospital"""
    return SEIRAHDParams(rho=0.15, kappaH=0.8)
