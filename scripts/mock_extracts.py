import numpy as np
import pandas as pd
from pathlib import Path

rng = np.random.default_rng(7)

countries = [
    "United States", "Japan", "Germany", "Korea", "China (People's Republic of)",
    "France", "United Kingdom", "Switzerland", "Netherlands", "Sweden",
    "Italy", "Canada", "Israel", "Finland", "Denmark",
]
technologies = [
    "Artificial intelligence", "Biotechnology", "Climate change mitigation",
    "ICT", "Medical technology", "Nanotechnology", "Pharmaceuticals",
    "Environment-related technologies",
]
authorities = ["EPO", "USPTO", "JPO", "KIPO", "CNIPA", "PCT"]
years = range(2017, 2022)

country_year = pd.DataFrame(
    [
        {
            "COUNTRY_NAME": c,
            "YEAR": y,
            "OBS_VALUE_sum": round(float(rng.gamma(2.0, 5000.0)), 1),
            "OBS_VALUE_mean": round(float(rng.gamma(2.0, 50.0)), 2),
            "OBS_VALUE_count": int(rng.integers(10, 200)),
            "PATENT_AUTHORITIES_nunique": int(rng.integers(1, len(authorities) + 1)),
            "MEASURE_nunique": int(rng.integers(1, 4)),
        }
        for c in countries
        for y in years
    ]
)

technology = pd.DataFrame(
    [
        {
            "WIPO": f"W{i}",
            "OECD_TECHNOLOGY_PATENT": f"T{i}",
            "Selected OECD technology domains": t,
            "COUNTRY_NAME": c,
            "OBS_VALUE_sum": round(float(rng.gamma(2.0, 1500.0)), 1),
            "OBS_VALUE_mean": round(float(rng.gamma(2.0, 30.0)), 2),
            "YEAR_min": 2017,
            "YEAR_max": 2021,
            "YEAR_count": 5,
        }
        for i, t in enumerate(technologies)
        for c in countries
        if rng.random() > 0.2
    ]
)

tidy = pd.DataFrame(
    [
        {
            "country": c,
            "country_code": c[:3].upper(),
            "year": y,
            "patent_authority": a,
            "measure_type": "Patent applications",
            "unit": "Number",
            "patent_count": int(rng.poisson(800)),
            "agent_role": "Inventor",
            "date_type": "Priority date",
        }
        for c in countries
        for y in years
        for a in authorities
    ]
)

authority = pd.DataFrame(
    [
        {
            "PATENT_AUTHORITIES": a,
            "COUNTRY_NAME": c,
            "OBS_VALUE_sum": round(float(rng.gamma(2.0, 4000.0)), 1),
            "OBS_VALUE_mean": round(float(rng.gamma(2.0, 40.0)), 2),
            "OBS_VALUE_std": round(float(rng.gamma(2.0, 10.0)), 2),
            "YEAR_min": 2017,
            "YEAR_max": 2021,
            "YEAR_count": 5,
        }
        for a in authorities
        for c in countries
    ]
)

out = Path("data")
out.mkdir(exist_ok=True)
country_year.to_csv(out / "country_year_aggregation.csv", index=False)
technology.to_csv(out / "technology_aggregation.csv", index=False)
tidy.to_csv(out / "tidy_data.csv", index=False)
authority.to_csv(out / "authority_aggregation.csv", index=False)
print("wrote", out.resolve(), country_year.shape, technology.shape, tidy.shape, authority.shape)
