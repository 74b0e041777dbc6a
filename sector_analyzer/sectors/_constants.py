"""Static sector universe and provider reference tables."""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Sector universe
# ---------------------------------------------------------------------------

SECTOR_NAMES: tuple[str, ...] = (
    "Information Technology",
    "Financials",
    "Energy",
    "Health Care",
    "Consumer Discretionary",
    "Consumer Staples",
    "Industrials",
    "Materials",
    "Utilities",
    "Real Estate",
    "Communication Services",
)

SECTOR_ETFS: dict[str, str] = {
    "Information Technology": "XLK",
    "Financials": "XLF",
    "Energy": "XLE",
    "Health Care": "XLV",
    "Consumer Discretionary": "XLY",
    "Consumer Staples": "XLP",
    "Industrials": "XLI",
    "Materials": "XLB",
    "Utilities": "XLU",
    "Real Estate": "XLRE",
    "Communication Services": "XLC",
}

MARKET_BENCHMARK = "SPY"

# ---------------------------------------------------------------------------
# Macro and employment series
# ---------------------------------------------------------------------------

REFERENCE_RATE_KEY = "treasury_10y"

FRED_SERIES: dict[str, str] = {
    "treasury_10y": "DGS10",
    "treasury_2y": "DGS2",
    "fed_funds": "FEDFUNDS",
    "cpi": "CPIAUCSL",
    "core_cpi": "CPILFESL",
    "gdp": "GDP",
}

BLS_EMPLOYMENT_SERIES: dict[str, str] = {
    "Information Technology": "CES6000000001",
    "Financials": "CES5500000001",
    "Energy": "CES1021000001",
    "Health Care": "CES6562000001",
    "Consumer Discretionary": "CES4200000001",
    "Consumer Staples": "CES3100000001",
    "Industrials": "CES3000000001",
    "Materials": "CES1021200001",
    "Utilities": "CES4422000001",
    "Real Estate": "CES5553000001",
    "Communication Services": "CES5000000001",
}

# ---------------------------------------------------------------------------
# R&D intensity
# ---------------------------------------------------------------------------

# Historical Damodaran averages (R&D as a fraction of revenue).
DEFAULT_RD_INTENSITY: dict[str, float] = {
    "Information Technology": 0.15,
    "Health Care": 0.12,
    "Communication Services": 0.08,
    "Consumer Discretionary": 0.04,
    "Industrials": 0.03,
    "Materials": 0.02,
    "Consumer Staples": 0.02,
    "Financials": 0.01,
    "Energy": 0.01,
    "Utilities": 0.005,
    "Real Estate": 0.001,
}

DAMODARAN_TO_GICS: dict[str, str] = {
    # Information Technology
    "Software (System & Application)": "Information Technology",
    "Software (Entertainment)": "Information Technology",
    "Software (Internet)": "Information Technology",
    "Semiconductor": "Information Technology",
    "Semiconductor Equip": "Information Technology",
    "Computer Services": "Information Technology",
    "Computers/Peripherals": "Information Technology",
    "Electronics (Consumer & Office)": "Information Technology",
    "Electronics (General)": "Information Technology",
    # Financials
    "Banks (Regional)": "Financials",
    "Banks (Money Center)": "Financials",
    "Financial Svcs. (Non-bank & Insurance)": "Financials",
    "Insurance (General)": "Financials",
    "Insurance (Life)": "Financials",
    "Insurance (Prop/Cas.)": "Financials",
    "Brokerage & Investment Banking": "Financials",
    # Energy
    "Oil/Gas (Production and Exploration)": "Energy",
    "Oil/Gas (Integrated)": "Energy",
    "Oil/Gas Distribution": "Energy",
    "Oilfield Svcs/Equip.": "Energy",
    # Health Care
    "Healthcare Products": "Health Care",
    "Healthcare Support Services": "Health Care",
    "Healthcare Information and Technology": "Health Care",
    "Hospitals/Healthcare Facilities": "Health Care",
    "Drugs (Pharmaceutical)": "Health Care",
    "Drugs (Biotechnology)": "Health Care",
    "Medical Supplies": "Health Care",
    # Consumer Discretionary
    "Retail (General)": "Consumer Discretionary",
    "Retail (Online)": "Consumer Discretionary",
    "Retail (Special Lines)": "Consumer Discretionary",
    "Auto & Truck": "Consumer Discretionary",
    "Auto Parts": "Consumer Discretionary",
    "Apparel": "Consumer Discretionary",
    "Restaurant/Dining": "Consumer Discretionary",
    "Hotel/Gaming": "Consumer Discretionary",
    # Consumer Staples
    "Household Products": "Consumer Staples",
    "Food Processing": "Consumer Staples",
    "Beverage (Alcoholic)": "Consumer Staples",
    "Beverage (Soft)": "Consumer Staples",
    "Tobacco": "Consumer Staples",
    # Industrials
    "Aerospace/Defense": "Industrials",
    "Air Transport": "Industrials",
    "Trucking": "Industrials",
    "Transportation": "Industrials",
    "Machinery": "Industrials",
    "Industrial Services": "Industrials",
    "Building Materials": "Industrials",
    "Engineering/Construction": "Industrials",
    # Materials
    "Metals & Mining": "Materials",
    "Steel": "Materials",
    "Chemical (Basic)": "Materials",
    "Chemical (Diversified)": "Materials",
    "Chemical (Specialty)": "Materials",
    "Paper/Forest Products": "Materials",
    "Packaging & Container": "Materials",
    # Utilities
    "Utility (General)": "Utilities",
    "Utility (Water)": "Utilities",
    "Power": "Utilities",
    # Real Estate
    "R.E.I.T.": "Real Estate",
    "Real Estate (General/Diversified)": "Real Estate",
    "Real Estate (Development)": "Real Estate",
    "Real Estate (Operations & Services)": "Real Estate",
    # Communication Services
    "Telecom Services": "Communication Services",
    "Telecom. Equipment": "Communication Services",
    "Broadcasting": "Communication Services",
    "Cable TV": "Communication Services",
    "Entertainment": "Communication Services",
    "Publishing & Newspapers": "Communication Services",
    "Advertising": "Communication Services",
}
