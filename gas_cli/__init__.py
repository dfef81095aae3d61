"""Command line front end for the gas fee engine."""
