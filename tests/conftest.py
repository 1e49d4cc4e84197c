import matplotlib

# Kein Fenster in Tests
matplotlib.use("Agg")
