from .mean_analyzer import MeanAnalyzer, aggregate, bloodmeans

__all__ = ['MeanAnalyzer', 'aggregate', 'bloodmeans']
