from __future__ import annotations

GLOBAL_QUOTE_CSV = (
    "symbol,open,high,low,price,volume,latestDay,previousClose,change,changePercent\r\n"
    "IBM,233.5600,235.9900,232.8100,235.2400,3461244,2025-06-20,234.5000,0.7400,0.3156%\r\n"
)

DAILY_ADJUSTED_CSV = (
    "timestamp,open,high,low,close,adjusted_close,volume,dividend_amount,split_coefficient\r\n"
    "2025-06-20,233.56,235.99,232.81,235.24,235.24,3461244,0.0000,1.0\r\n"
    "2025-06-19,230.00,234.10,229.50,234.50,234.50,2871000,1.6800,1.0\r\n"
)

MONTHLY_ADJUSTED_CSV = (
    "timestamp,open,high,low,close,adjusted close,volume,dividend amount\r\n"
    "2025-05-30,241.44,266.45,237.42,259.06,259.06,90347300,1.6800\r\n"
)

INVALID_KEY = {"Error Message": "the parameter apikey is invalid or missing."}

RATE_LIMIT_NOTE = {
    "Note": (
        "Thank you for using Alpha Vantage! Our standard API call frequency is "
        "5 calls per minute and 500 calls per day."
    )
}

OVERVIEW = {
    "Symbol": "IBM",
    "AssetType": "Common Stock",
    "Name": "International Business Machines",
    "CIK": "51143",
    "Exchange": "NYSE",
    "Currency": "USD",
    "Country": "USA",
    "Sector": "TECHNOLOGY",
    "FiscalYearEnd": "December",
    "LatestQuarter": "2025-03-31",
    "MarketCapitalization": "218628506000",
    "EBITDA": "14646000000",
    "PERatio": "36.66",
    "PEGRatio": "None",
    "Beta": "0.697",
    "52WeekHigh": "266.45",
    "DividendDate": "2025-06-10",
    "ExDividendDate": "0000-00-00",
    "SharesOutstanding": "929397000",
    "ForwardPE": "-",
}

ETF_PROFILE = {
    "net_assets": "532000000000",
    "net_expense_ratio": "0.002",
    "portfolio_turnover": "0.08",
    "dividend_yield": "0.0061",
    "inception_date": "1999-03-10",
    "leveraged": "NO",
    "sectors": [
        {"sector": "INFORMATION TECHNOLOGY", "weight": "0.517"},
        {"sector": "COMMUNICATION SERVICES", "weight": "0.161"},
    ],
    "holdings": [
        {"symbol": "NVDA", "description": "NVIDIA CORP", "weight": "0.0914"},
        {"symbol": "n/a", "description": "OTHER", "weight": "None"},
    ],
}
