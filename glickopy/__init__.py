"""
glickopy
========

Glicko-2 rating updates for competitors after a rating period.

- glickopy.core: RatingSystem parameters, Rating values, match Results and scale conversion.
- glickopy.models: the expected outcome model, estimation functions, volatility solver,
  the Glicko2 update engine and the roster batch driver.

paper: http://www.glicko.net/research/dpcmsv.pdf
example: http://www.glicko.net/glicko/glicko2.pdf
"""
