"""Static portfolio holdings with last-known prices."""

from dashboard.domain.models import Holding


PORTFOLIO_HOLDINGS: tuple[Holding, ...] = (
    # Financial
    Holding(1, "HDFC Bank", 1490, 50, "HDFCBANK", "Financial", fallback_price=1700.15),
    Holding(2, "Bajaj Finance", 6466, 15, "BAJFINANCE", "Financial", fallback_price=8419.6),
    Holding(3, "ICICI Bank", 780, 84, "ICICIBANK", "Financial", fallback_price=1215.5),
    Holding(4, "Bajaj Housing", 130, 504, "BAJAJHLDNG", "Financial", fallback_price=112.85),
    Holding(5, "Savani Financials", 24, 1080, "SAVANI", "Financial", fallback_price=14.86),
    # Technology
    Holding(10, "Affle India", 1151, 50, "AFFLE", "Technology", fallback_price=1459.6),
    Holding(11, "LTI Mindtree", 4775, 16, "LTIM", "Technology", fallback_price=4793.8),
    Holding(12, "KPIT Tech", 672, 61, "KPITTECH", "Technology", fallback_price=1293.1),
    Holding(13, "Tata Tech", 1072, 63, "TATATECH", "Technology", fallback_price=662),
    Holding(14, "BLS E-Services", 232, 191, "BLS", "Technology", fallback_price=152.9),
    Holding(15, "Tanla", 1134, 45, "TANLA", "Technology", fallback_price=449.5),
    # Consumer
    Holding(17, "Dmart", 3777, 27, "DMART", "Consumer", fallback_price=3451.1),
    Holding(18, "Tata Consumer", 845, 90, "TATACONSUM", "Consumer", fallback_price=961.1),
    Holding(19, "Pidilite", 2376, 36, "PIDILITIND", "Consumer", fallback_price=2730),
    # Power
    Holding(21, "Tata Power", 224, 225, "TATAPOWER", "Power", fallback_price=351),
    Holding(22, "KPI Green", 875, 50, "KPIGREEN", "Power", fallback_price=402.4),
    Holding(23, "Suzlon", 44, 450, "SUZLON", "Power", fallback_price=51.36),
    Holding(24, "Gensol", 998, 45, "GENSOL", "Power", fallback_price=372.6),
    # Pipe
    Holding(26, "Hariom Pipes", 580, 60, "HARIOMPIPE", "Pipe", fallback_price=355.75),
    Holding(27, "Astral", 1517, 56, "ASTRAL", "Pipe", fallback_price=1317.6),
    Holding(28, "Polycab", 2818, 28, "POLYCAB", "Pipe", fallback_price=5000),
    # Others
    Holding(30, "Clean Science", 1610, 32, "CLEAN", "Others", fallback_price=1237.45),
    Holding(31, "Deepak Nitrite", 2248, 27, "DEEPAKNTR", "Others", fallback_price=1927.9),
    Holding(32, "Fine Organic", 4284, 16, "FINEORG", "Others", fallback_price=3743),
    Holding(33, "Gravita", 2037, 8, "GRAVITA", "Others", fallback_price=1614.2),
    Holding(34, "SBI Life", 1197, 49, "SBILIFE", "Others", fallback_price=1405.45),
    # Sold
    Holding(38, "Infy", 1647, 36, "INFY", "Sold", sold_price=1920, fallback_price=1725.3),
    Holding(39, "Happeist Mind", 1103, 45, "HAPPSTMNDS", "Sold", sold_price=716, fallback_price=701.65),
    Holding(40, "Easemytrip", 20, 1332, "EASEMYTRIP", "Sold", sold_price=15.5, fallback_price=11.51),
)
