"""
Sampling Distribution Simulator v1.0.0

Monte Carlo demonstration of the sampling distributions of the sample
mean and sample variance drawn from a normal population N(mu, sigma^2).
Each run draws 10 000 samples of size n, converts them into
t-statistics and chi-squared statistics, bins both into density
histograms, and compares them against the theoretical t(n-1) and
chi^2(n-1) densities.
"""

APP_NAME = "Sampling Distribution Simulator"
APP_VERSION = "1.0.0"
APP_DATE = "2026-10-18"
__version__ = APP_VERSION
