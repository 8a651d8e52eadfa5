"""Testing helpers – Hypothesis strategies for codes drawn from the shipped tables."""
