import matplotlib

# headless rendering for the render and cli tests
matplotlib.use("Agg")
