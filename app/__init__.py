"""
Circuit Flow - circuit analysis and current-flow animation engine.

Packages are imported by bare name (models, simulation, controllers, GUI)
with this directory on sys.path.
"""
