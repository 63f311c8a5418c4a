"""Simulation systems, each with an update(world) step run by the tick manager."""