"""
===========================================================
rhs.py
Author: seirahd contributors
Last Updated: 2026-10-19
===========================================================

Description:
    Right-hand side of the SEIR(+AHD) epidemic model, written
    to be handed directly to an ODE solver (solve_ivp, odeint
    via a lambda, or a hand-rolled RK4).

    State  y     = [S, E, I, A, H, R, D, C]
    Params param = [N0, beta, alpha, fE, gamma, rho, delta, kappaH]

    S = susceptibles              R = recovered
    E = exposed                   D = deceased
    I = symptomatic infectious    C = cumulative infectious
    A = asymptomatic infectious
    H = hospitalized

    N0     = initial population size           (individuals)
    beta   = transmission rate                 (days^-1)
    alpha  = latent rate                       (days^-1)
    fE     = symptomatic fraction              (dimensionless)
    gamma  = recovery rate                     (days^-1)
    rho    = hospitalization rate              (days^-1)
    delta  = death rate                        (days^-1)
    kappaH = hospitalization mortality-factor  (dimensionless)

Example Usage:
    from scipy.integrate import solve_ivp
    from seirahd.rhs import seirahd_rhs
    sol = solve_ivp(seirahd_rhs, (0, 180), y0, args=(param,))

Notes:
    - t is accepted and ignored; the system is autonomous.
    - y may be a (8, k) array (solve_ivp vectorized=True).
    - N = N0 - D is not guarded. N == 0 gives inf/nan with a
      numpy RuntimeWarning instead of a silent clamp.
-----------------------------------------------------------
License: MIT
===========================================================
"""

from __future__ import annotations
import numpy as np
from typing import Sequence

from .exceptions import (
    InvalidParameterCount,
    InvalidPopulationSize,
    NegativeParameter,
    FractionOutOfRange,
)

COMPARTMENTS = ('S', 'E', 'I', 'A', 'H', 'R', 'D', 'C')
PARAMETERS = ('N0', 'beta', 'alpha', 'fE', 'gamma', 'rho', 'delta', 'kappaH')


def validate_parameters(param: Sequence[float]) -> np.ndarray:
    """
    Check a parameter vector and return it as a float array.

    Raises InvalidParameterCount, InvalidPopulationSize,
    NegativeParameter or FractionOutOfRange, in that order.
    """
    p = np.asarray(param, dtype=float).ravel()

    if p.size < len(PARAMETERS):
        raise InvalidParameterCount(
            f"too few model parameters: expected {len(PARAMETERS)}, got {p.size}")
    if p.size > len(PARAMETERS):
        raise InvalidParameterCount(
            f"too many model parameters: expected {len(PARAMETERS)}, got {p.size}")

    if np.mod(p[0], 1) != 0:
        raise InvalidPopulationSize(f"population size N0 must be an integer, got {p[0]}")

    negative = [name for name, value in zip(PARAMETERS, p) if value < 0]
    if negative:
        raise NegativeParameter(f"parameters must be non-negative: {', '.join(negative)}")

    # fE and kappaH are fractions
    for idx in (3, 7):
        if p[idx] > 1:
            raise FractionOutOfRange(
                f"{PARAMETERS[idx]} must lie in [0, 1], got {p[idx]}")

    return p


def seirahd_rhs(t: float, y, param: Sequence[float]) -> np.ndarray:
    """
    Evaluate d/dt [S, E, I, A, H, R, D, C] at state y.

    Parameters
    ----------
    t : float
        Current time (unused, kept for the solver callback signature)
    y : array-like, shape (8,) or (8, k)
        Current state [S, E, I, A, H, R, D, C]
    param : array-like, shape (8,)
        [N0, beta, alpha, fE, gamma, rho, delta, kappaH]

    Returns
    -------
    dydt : np.ndarray
        [dS, dE, dI, dA, dH, dR, dD, dC], same shape as y
    """
    N0, beta, alpha, fE, gamma, rho, delta, kappaH = validate_parameters(param)
    S, E, I, A, H, R, D, C = np.asarray(y, dtype=float)

    # current (living) population
    N = N0 - D

    # force of infection: I, A and H all transmit
    infection = beta * S * (I + A + H) / N

    dS = -infection
    dE = infection - alpha * E
    dI = fE * alpha * E - (gamma + rho + delta) * I
    dA = (1 - fE) * alpha * E - (gamma + delta) * A
    dH = rho * I - (gamma + kappaH * delta) * H
    dR = gamma * (I + A + H)
    dD = delta * (I + A + kappaH * H)
    dC = alpha * E

    return np.array([dS, dE, dI, dA, dH, dR, dD, dC])


# generic solver-callback name
evaluate = seirahd_rhs
