from .country_view import CountryTotalsView, CountryShareView
from .trend_view import YearlyTrendView, CountryTrendsView
from .technology_view import TechnologyDistributionView, TechnologyTotalsView
from .authority_view import AuthorityTotalsView

__all__ = [
    "CountryTotalsView",
    "CountryShareView",
    "YearlyTrendView",
    "CountryTrendsView",
    "TechnologyDistributionView",
    "TechnologyTotalsView",
    "AuthorityTotalsView",
]
