from wavesim.solvers.wave import Wave
