"""
Volatility solver (step 5 of the Glicko-2 algorithm)

The new volatility sigma' is exp(x / 2) where x is the root of

    f(x) = e^x (delta^2 - phi^2 - v - e^x) / (2 (phi^2 + v + e^x)^2) - (x - a) / tau^2

with a = ln(sigma^2). There is no closed form so the root is found with the Illinois
variant of regula falsi, starting from a bracket [A, B] around the root.
"""
import logging
import math
from glickopy.utils.constants import EPSILON, MAX_ITERATIONS

logger = logging.getLogger(__name__)


class VolatilityConvergenceError(ArithmeticError):
    """raised when the volatility solver hits its iteration cap before converging"""

    def __init__(self, message, lower=None, upper=None, iterations=None):
        super().__init__(message)
        self.lower = lower
        self.upper = upper
        self.iterations = iterations


def volatility_objective(x, delta2, phi2, v, a, tau2):
    """f(x), strictly decreasing with a single root"""
    ex = math.exp(x)
    phi2_v_ex = phi2 + v + ex
    num_1 = ex * (delta2 - phi2_v_ex)
    denom_1 = 2.0 * (phi2_v_ex**2.0)
    term_2 = (x - a) / tau2
    return (num_1 / denom_1) - term_2


def find_upper_bound(delta2, phi2, v, a, tau, max_iter=MAX_ITERATIONS):
    """
    Finds the second end of the bracket, B, such that the root lies between a and B.

    Parameters:
        delta2 (float): squared estimated improvement
        phi2 (float): squared pre-period deviation on the Glicko-2 scale
        v (float): estimated variance
        a (float): log of the squared pre-period volatility
        tau (float): system constant
        max_iter (int): how many steps of size tau to take looking for f(B) >= 0

    Returns:
        float: B

    Raises:
        VolatilityConvergenceError: if f does not change sign within max_iter steps
    """
    if delta2 > (phi2 + v):
        return math.log(delta2 - phi2 - v)

    tau2 = tau**2.0
    for k in range(1, max_iter + 1):
        B = a - (k * tau)
        if volatility_objective(B, delta2, phi2, v, a, tau2) >= 0:
            logger.debug('volatility bracket found after %d steps: [%s, %s]', k, B, a)
            return B

    logger.error('no sign change in the volatility objective within %d steps below a=%s', max_iter, a)
    raise VolatilityConvergenceError(
        f'Could not bracket the new volatility within {max_iter} steps',
        lower=a,
        upper=a - (max_iter * tau),
        iterations=max_iter,
    )


def solve_volatility(phi, delta, v, sigma, tau, epsilon=EPSILON, max_iter=MAX_ITERATIONS):
    """
    Computes the new volatility sigma' of a competitor.

    Parameters:
        phi (float): pre-period deviation on the Glicko-2 scale
        delta (float): estimated improvement (already multiplied by v)
        v (float): estimated variance
        sigma (float): pre-period volatility
        tau (float): system constant
        epsilon (float): convergence tolerance on the width of the bracket
        max_iter (int): cap on both the bracket search and the Illinois iterations

    Returns:
        float: sigma'

    Raises:
        VolatilityConvergenceError: if either the bracket search or the root finding runs out of iterations
    """
    delta2 = delta**2.0
    phi2 = phi**2.0
    tau2 = tau**2.0
    A = a = math.log(sigma**2.0)
    B = find_upper_bound(delta2, phi2, v, a, tau, max_iter=max_iter)

    f_A = volatility_objective(A, delta2, phi2, v, a, tau2)
    f_B = volatility_objective(B, delta2, phi2, v, a, tau2)
    iterations = 0
    while math.fabs(A - B) > epsilon:
        if iterations >= max_iter:
            logger.error(
                'volatility solver did not converge after %d iterations, bracket [%s, %s]', iterations, A, B
            )
            raise VolatilityConvergenceError(
                f'Volatility did not converge within {max_iter} iterations',
                lower=A,
                upper=B,
                iterations=iterations,
            )
        C = A + ((A - B) * f_A) / (f_B - f_A)
        f_C = volatility_objective(C, delta2, phi2, v, a, tau2)
        if (f_C * f_B) <= 0:
            A = B
            f_A = f_B
        else:
            # Illinois step, keep A but halve its weight
            f_A = f_A / 2.0
        B = C
        f_B = f_C
        iterations += 1

    logger.debug('volatility converged after %d iterations', iterations)
    return math.exp(A / 2.0)
