"""
Models Module
=============

This module contains the pieces of the Glicko-2 rating system, designed by Mark Glickman, split by
the step of the algorithm they implement. Every function works on the Glicko-2 scale unless it takes
or returns a Rating.

Included components:
- expectation: The g function, which dampens the influence of uncertain opponents, and the expected score E.
- estimation: The estimated variance v and estimated improvement delta of a rating period.
- volatility: The Illinois regula falsi solver for the new volatility sigma'.
- glicko2: The Glicko2 update engine tying the steps together for one competitor.
- batch: Snapshot-safe updates for a whole roster after a round of matches.

"""
