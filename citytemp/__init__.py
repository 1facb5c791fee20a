"""City temperature lookup service built on the Open-Meteo APIs."""
