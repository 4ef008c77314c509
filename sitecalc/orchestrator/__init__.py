from .site_analysis import SiteAnalysisService

__all__ = ["SiteAnalysisService"]
