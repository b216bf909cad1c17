"""HTTP access to the LiftTick simulation."""
