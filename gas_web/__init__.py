"""HTTP JSON shell around the gas fee engine."""
