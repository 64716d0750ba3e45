"""IRS Collection Financial Standards and median income for Chapter 7 means tests.

Sources:
- National Standards: https://www.irs.gov/businesses/small-businesses-self-employed/national-standards-food-clothing-and-other-items
- Local Standards (Housing): https://www.irs.gov/businesses/small-businesses-self-employed/local-standards-housing-and-utilities
- Local Standards (Transportation): https://www.irs.gov/businesses/small-businesses-self-employed/local-standards-transportation
- Median income: https://www.justice.gov/ust/eo/bapcpa/20251101/bci_data/median_income_table.htm

Updated: 2025-11 (median income effective November 1, 2025)
"""

from datetime import date
from decimal import Decimal

from ..models.household import USRegion
from .tables import MetroArea, NationalStandardBreakdown, StandardsTables


D = Decimal


# =============================================================================
# NATIONAL STANDARDS - FOOD, CLOTHING, AND OTHER ITEMS
# =============================================================================
# Form B 122A-2, Line 6

NATIONAL_STANDARDS = {
    # Household size: food, housekeeping, apparel, personal care, misc
    1: NationalStandardBreakdown(D("733"), D("40"), D("99"), D("44"), D("149")),    # 1065
    2: NationalStandardBreakdown(D("858"), D("79"), D("186"), D("68"), D("265")),   # 1456
    3: NationalStandardBreakdown(D("1027"), D("79"), D("223"), D("68"), D("290")),  # 1687
    4: NationalStandardBreakdown(D("1209"), D("88"), D("284"), D("78"), D("351")),  # 2010
}

# For each additional person over 4, add $447
NATIONAL_STANDARDS_ADDITIONAL_PERSON = NationalStandardBreakdown(
    D("274"), D("0"), D("74"), D("26"), D("73")
)


# =============================================================================
# OUT-OF-POCKET HEALTH CARE
# =============================================================================
# Form B 122A-2, Line 7 - per person, by age

HEALTH_CARE_UNDER_65 = D("75")
HEALTH_CARE_65_AND_OVER = D("153")


# =============================================================================
# STATE MEDIAN FAMILY INCOME
# =============================================================================
# Format: state: (1-person, 2-person, 3-person, 4-person, additional per person)

STATE_MEDIAN_INCOME = {
    "AL": (D("62672"), D("75465"), D("90321"), D("104003"), D("11100")),
    "AK": (D("83617"), D("109662"), D("109662"), D("138492"), D("11100")),
    "AZ": (D("72039"), D("86745"), D("102274"), D("118067"), D("11100")),
    "AR": (D("56923"), D("71742"), D("80218"), D("94566"), D("11100")),
    "CA": (D("77221"), D("100161"), D("113553"), D("135505"), D("11100")),
    "CO": (D("85685"), D("106690"), D("127495"), D("149566"), D("11100")),
    "CT": (D("82141"), D("103501"), D("131022"), D("155834"), D("11100")),
    "DE": (D("67733"), D("92445"), D("108420"), D("128854"), D("11100")),
    "DC": (D("83202"), D("157259"), D("157259"), D("162327"), D("11100")),
    "FL": (D("68085"), D("84305"), D("95039"), D("111819"), D("11100")),
    "GA": (D("66722"), D("82787"), D("98877"), D("120315"), D("11100")),
    "HI": (D("83068"), D("103479"), D("120289"), D("138536"), D("11100")),
    "ID": (D("71531"), D("83951"), D("95859"), D("116594"), D("11100")),
    "IL": (D("71304"), D("91526"), D("110712"), D("134366"), D("11100")),
    "IN": (D("62808"), D("79884"), D("93175"), D("112691"), D("11100")),
    "IA": (D("65883"), D("86523"), D("101463"), D("122826"), D("11100")),
    "KS": (D("67423"), D("85199"), D("101189"), D("122741"), D("11100")),
    "KY": (D("60071"), D("71998"), D("83027"), D("106637"), D("11100")),
    "LA": (D("57923"), D("70493"), D("82433"), D("100971"), D("11100")),
    "ME": (D("73946"), D("88126"), D("104083"), D("128204"), D("11100")),
    "MD": (D("84699"), D("111673"), D("132464"), D("161913"), D("11100")),
    "MA": (D("85941"), D("109818"), D("135837"), D("173947"), D("11100")),
    "MI": (D("65625"), D("81293"), D("100797"), D("119856"), D("11100")),
    "MN": (D("75704"), D("95807"), D("123244"), D("146039"), D("11100")),
    "MS": (D("52594"), D("68525"), D("80722"), D("94965"), D("11100")),
    "MO": (D("63306"), D("79971"), D("97658"), D("115491"), D("11100")),
    "MT": (D("69482"), D("89107"), D("100637"), D("118578"), D("11100")),
    "NE": (D("65206"), D("88402"), D("100754"), D("121867"), D("11100")),
    "NV": (D("70370"), D("85660"), D("99032"), D("111184"), D("11100")),
    "NH": (D("85049"), D("106521"), D("137902"), D("151224"), D("11100")),
    "NJ": (D("84938"), D("104136"), D("133620"), D("163817"), D("11100")),
    "NM": (D("64537"), D("77534"), D("85784"), D("96074"), D("11100")),
    "NY": (D("71393"), D("90520"), D("112616"), D("135475"), D("11100")),
    "NC": (D("65396"), D("82221"), D("98932"), D("113744"), D("11100")),
    "ND": (D("71663"), D("93882"), D("103951"), D("134284"), D("11100")),
    "OH": (D("64541"), D("81578"), D("99876"), D("120531"), D("11100")),
    "OK": (D("59611"), D("75229"), D("84618"), D("99188"), D("11100")),
    "OR": (D("77061"), D("91268"), D("113736"), D("136434"), D("11100")),
    "PA": (D("70378"), D("85290"), D("107327"), D("132379"), D("11100")),
    "RI": (D("75662"), D("96205"), D("116357"), D("133954"), D("11100")),
    "SC": (D("63146"), D("81614"), D("93219"), D("113332"), D("11100")),
    "SD": (D("67416"), D("87506"), D("98297"), D("127386"), D("11100")),
    "TN": (D("62339"), D("80722"), D("95011"), D("106775"), D("11100")),
    "TX": (D("65123"), D("84491"), D("96728"), D("114938"), D("11100")),
    "UT": (D("85644"), D("93302"), D("109860"), D("128363"), D("11100")),
    "VT": (D("70603"), D("94477"), D("111150"), D("134056"), D("11100")),
    "VA": (D("76479"), D("98577"), D("120001"), D("141113"), D("11100")),
    "WA": (D("86314"), D("104354"), D("128360"), D("152553"), D("11100")),
    "WV": (D("62270"), D("66833"), D("89690"), D("91270"), D("11100")),
    "WI": (D("69343"), D("87938"), D("105734"), D("129964"), D("11100")),
    "WY": (D("69906"), D("89156"), D("95951"), D("107469"), D("11100")),
}

# Unknown states: $60,000 plus $15,000 per additional person
MEDIAN_FALLBACK_BASE = D("60000")
MEDIAN_FALLBACK_PER_PERSON = D("15000")


# =============================================================================
# LOCAL STANDARDS - TRANSPORTATION
# =============================================================================
# Form B 122A-2, Lines 12-14:
# 1. Vehicle ownership (lease or purchase) - National, max 2 vehicles
# 2. Vehicle operating (fuel, maintenance, insurance) - Regional or metro
# 3. Public transportation - National, when no vehicle

VEHICLE_OWNERSHIP = {
    1: D("662"),
    2: D("1324"),
}

PUBLIC_TRANSPORTATION = D("244")

# Baseline operating costs for counties outside a named metro area
REGIONAL_OPERATING = {
    USRegion.NORTHEAST: {1: D("302"), 2: D("604")},
    USRegion.MIDWEST: {1: D("259"), 2: D("518")},
    USRegion.SOUTH: {1: D("281"), 2: D("562")},
    USRegion.WEST: {1: D("297"), 2: D("594")},
}

METRO_AREAS = {
    # Northeast
    "BOSTON": MetroArea("Boston", D("338"), D("676"), USRegion.NORTHEAST),
    "NEW_YORK": MetroArea("New York", D("401"), D("802"), USRegion.NORTHEAST),
    "PHILADELPHIA": MetroArea("Philadelphia", D("300"), D("600"), USRegion.NORTHEAST),
    # Midwest
    "CHICAGO": MetroArea("Chicago", D("296"), D("592"), USRegion.MIDWEST),
    "CLEVELAND": MetroArea("Cleveland", D("259"), D("518"), USRegion.MIDWEST),
    "DETROIT": MetroArea("Detroit", D("365"), D("730"), USRegion.MIDWEST),
    "MINNEAPOLIS": MetroArea("Minneapolis-St. Paul", D("284"), D("568"), USRegion.MIDWEST),
    "ST_LOUIS": MetroArea("St. Louis", D("232"), D("464"), USRegion.MIDWEST),
    # South
    "ATLANTA": MetroArea("Atlanta", D("320"), D("640"), USRegion.SOUTH),
    "BALTIMORE": MetroArea("Baltimore", D("306"), D("612"), USRegion.SOUTH),
    "DALLAS": MetroArea("Dallas-Ft. Worth", D("320"), D("640"), USRegion.SOUTH),
    "HOUSTON": MetroArea("Houston", D("359"), D("718"), USRegion.SOUTH),
    "MIAMI": MetroArea("Miami", D("400"), D("800"), USRegion.SOUTH),
    "TAMPA": MetroArea("Tampa", D("335"), D("670"), USRegion.SOUTH),
    "WASHINGTON_DC": MetroArea("Washington, D.C.", D("295"), D("590"), USRegion.SOUTH),
    # West
    "ANCHORAGE": MetroArea("Anchorage", D("219"), D("438"), USRegion.WEST),
    "DENVER": MetroArea("Denver", D("337"), D("674"), USRegion.WEST),
    "HONOLULU": MetroArea("Honolulu", D("252"), D("504"), USRegion.WEST),
    "LOS_ANGELES": MetroArea("Los Angeles", D("353"), D("706"), USRegion.WEST),
    "PHOENIX": MetroArea("Phoenix", D("358"), D("716"), USRegion.WEST),
    "SAN_DIEGO": MetroArea("San Diego", D("335"), D("670"), USRegion.WEST),
    "SAN_FRANCISCO": MetroArea("San Francisco", D("362"), D("724"), USRegion.WEST),
    "SEATTLE": MetroArea("Seattle", D("270"), D("540"), USRegion.WEST),
}

# STATE -> COUNTY -> METRO_AREA key. Counties not listed use the regional baseline.
COUNTY_TO_METRO = {
    "MA": {
        "ESSEX": "BOSTON", "MIDDLESEX": "BOSTON", "NORFOLK": "BOSTON",
        "PLYMOUTH": "BOSTON", "SUFFOLK": "BOSTON",
    },
    "NH": {"ROCKINGHAM": "BOSTON", "STRAFFORD": "BOSTON"},
    "NY": {
        "BRONX": "NEW_YORK", "KINGS": "NEW_YORK", "NASSAU": "NEW_YORK",
        "NEW YORK": "NEW_YORK", "PUTNAM": "NEW_YORK", "QUEENS": "NEW_YORK",
        "RICHMOND": "NEW_YORK", "ROCKLAND": "NEW_YORK", "SUFFOLK": "NEW_YORK",
        "WESTCHESTER": "NEW_YORK",
    },
    "NJ": {
        "BERGEN": "NEW_YORK", "ESSEX": "NEW_YORK", "HUDSON": "NEW_YORK",
        "HUNTERDON": "NEW_YORK", "MIDDLESEX": "NEW_YORK", "MONMOUTH": "NEW_YORK",
        "MORRIS": "NEW_YORK", "OCEAN": "NEW_YORK", "PASSAIC": "NEW_YORK",
        "SOMERSET": "NEW_YORK", "SUSSEX": "NEW_YORK", "UNION": "NEW_YORK",
        "BURLINGTON": "PHILADELPHIA", "CAMDEN": "PHILADELPHIA",
        "GLOUCESTER": "PHILADELPHIA", "SALEM": "PHILADELPHIA",
    },
    "PA": {
        "BUCKS": "PHILADELPHIA", "CHESTER": "PHILADELPHIA", "DELAWARE": "PHILADELPHIA",
        "MONTGOMERY": "PHILADELPHIA", "PHILADELPHIA": "PHILADELPHIA",
    },
    "DE": {"NEW CASTLE": "PHILADELPHIA"},
    "MD": {
        "CECIL": "PHILADELPHIA",
        "ANNE ARUNDEL": "BALTIMORE", "BALTIMORE": "BALTIMORE",
        "BALTIMORE CITY": "BALTIMORE", "CARROLL": "BALTIMORE", "HARFORD": "BALTIMORE",
        "HOWARD": "BALTIMORE", "QUEEN ANNE'S": "BALTIMORE",
        "CHARLES": "WASHINGTON_DC", "FREDERICK": "WASHINGTON_DC",
        "MONTGOMERY": "WASHINGTON_DC", "PRINCE GEORGE": "WASHINGTON_DC",
        "PRINCE GEORGE'S": "WASHINGTON_DC",
    },
    "DC": {
        "DISTRICT": "WASHINGTON_DC", "DISTRICT OF COLUMBIA": "WASHINGTON_DC",
        "WASHINGTON": "WASHINGTON_DC",
    },
    "VA": {
        "ARLINGTON": "WASHINGTON_DC", "CLARKE": "WASHINGTON_DC",
        "CULPEPER": "WASHINGTON_DC", "FAIRFAX": "WASHINGTON_DC",
        "FAUQUIER": "WASHINGTON_DC", "LOUDOUN": "WASHINGTON_DC",
        "PRINCE WILLIAM": "WASHINGTON_DC", "RAPPAHANNOCK": "WASHINGTON_DC",
        "SPOTSYLVANIA": "WASHINGTON_DC", "STAFFORD": "WASHINGTON_DC",
        "WARREN": "WASHINGTON_DC", "ALEXANDRIA": "WASHINGTON_DC",
        "FALLS CHURCH": "WASHINGTON_DC", "FREDERICKSBURG": "WASHINGTON_DC",
        "MANASSAS": "WASHINGTON_DC", "MANASSAS PARK": "WASHINGTON_DC",
    },
    "WV": {"JEFFERSON": "WASHINGTON_DC"},
    "IL": {
        "COOK": "CHICAGO", "DEKALB": "CHICAGO", "DUPAGE": "CHICAGO",
        "GRUNDY": "CHICAGO", "KANE": "CHICAGO", "KENDALL": "CHICAGO",
        "LAKE": "CHICAGO", "MCHENRY": "CHICAGO", "WILL": "CHICAGO",
        "BOND": "ST_LOUIS", "CALHOUN": "ST_LOUIS", "CLINTON": "ST_LOUIS",
        "JERSEY": "ST_LOUIS", "MACOUPIN": "ST_LOUIS", "MADISON": "ST_LOUIS",
        "MONROE": "ST_LOUIS", "ST. CLAIR": "ST_LOUIS", "ST CLAIR": "ST_LOUIS",
    },
    "IN": {"JASPER": "CHICAGO", "LAKE": "CHICAGO", "NEWTON": "CHICAGO", "PORTER": "CHICAGO"},
    "OH": {
        "ASHTABULA": "CLEVELAND", "CUYAHOGA": "CLEVELAND", "GEAUGA": "CLEVELAND",
        "LAKE": "CLEVELAND", "LORAIN": "CLEVELAND", "MEDINA": "CLEVELAND",
    },
    "MI": {
        "LAPEER": "DETROIT", "LIVINGSTON": "DETROIT", "MACOMB": "DETROIT",
        "OAKLAND": "DETROIT", "ST. CLAIR": "DETROIT", "ST CLAIR": "DETROIT",
        "WAYNE": "DETROIT",
    },
    "MN": {
        "ANOKA": "MINNEAPOLIS", "CARVER": "MINNEAPOLIS", "CHISAGO": "MINNEAPOLIS",
        "DAKOTA": "MINNEAPOLIS", "HENNEPIN": "MINNEAPOLIS", "ISANTI": "MINNEAPOLIS",
        "LE SUEUR": "MINNEAPOLIS", "MILLE LACS": "MINNEAPOLIS", "RAMSEY": "MINNEAPOLIS",
        "SCOTT": "MINNEAPOLIS", "SHERBURNE": "MINNEAPOLIS", "WASHINGTON": "MINNEAPOLIS",
        "WRIGHT": "MINNEAPOLIS",
    },
    "WI": {"PIERCE": "MINNEAPOLIS", "ST. CROIX": "MINNEAPOLIS", "ST CROIX": "MINNEAPOLIS"},
    "MO": {
        "FRANKLIN": "ST_LOUIS", "JEFFERSON": "ST_LOUIS", "LINCOLN": "ST_LOUIS",
        "ST. CHARLES": "ST_LOUIS", "ST CHARLES": "ST_LOUIS", "ST. LOUIS": "ST_LOUIS",
        "ST LOUIS": "ST_LOUIS", "ST. LOUIS CITY": "ST_LOUIS", "ST LOUIS CITY": "ST_LOUIS",
        "WARREN": "ST_LOUIS", "CRAWFORD": "ST_LOUIS",
    },
    "GA": {
        "BARROW": "ATLANTA", "BARTOW": "ATLANTA", "BUTTS": "ATLANTA", "CARROLL": "ATLANTA",
        "CHEROKEE": "ATLANTA", "CLAYTON": "ATLANTA", "COBB": "ATLANTA", "COWETA": "ATLANTA",
        "DAWSON": "ATLANTA", "DEKALB": "ATLANTA", "DOUGLAS": "ATLANTA", "FAYETTE": "ATLANTA",
        "FORSYTH": "ATLANTA", "FULTON": "ATLANTA", "GWINNETT": "ATLANTA",
        "HARALSON": "ATLANTA", "HEARD": "ATLANTA", "HENRY": "ATLANTA", "JASPER": "ATLANTA",
        "LUMPKIN": "ATLANTA", "MERIWETHER": "ATLANTA", "MORGAN": "ATLANTA",
        "NEWTON": "ATLANTA", "PAULDING": "ATLANTA", "PICKENS": "ATLANTA", "PIKE": "ATLANTA",
        "ROCKDALE": "ATLANTA", "SPALDING": "ATLANTA", "WALTON": "ATLANTA",
    },
    "TX": {
        "COLLIN": "DALLAS", "DALLAS": "DALLAS", "DENTON": "DALLAS", "ELLIS": "DALLAS",
        "HUNT": "DALLAS", "JOHNSON": "DALLAS", "KAUFMAN": "DALLAS", "PARKER": "DALLAS",
        "ROCKWALL": "DALLAS", "TARRANT": "DALLAS", "WISE": "DALLAS",
        "AUSTIN": "HOUSTON", "BRAZORIA": "HOUSTON", "CHAMBERS": "HOUSTON",
        "FORT BEND": "HOUSTON", "GALVESTON": "HOUSTON", "HARRIS": "HOUSTON",
        "LIBERTY": "HOUSTON", "MONTGOMERY": "HOUSTON", "SAN JACINTO": "HOUSTON",
        "WALLER": "HOUSTON",
    },
    "FL": {
        "BROWARD": "MIAMI", "MIAMI-DADE": "MIAMI", "PALM BEACH": "MIAMI",
        "HERNANDO": "TAMPA", "HILLSBOROUGH": "TAMPA", "PASCO": "TAMPA", "PINELLAS": "TAMPA",
    },
    "AK": {"ANCHORAGE": "ANCHORAGE", "MATANUSKA-SUSITNA": "ANCHORAGE"},
    "CO": {
        "ADAMS": "DENVER", "ARAPAHOE": "DENVER", "BROOMFIELD": "DENVER",
        "CLEAR CREEK": "DENVER", "DENVER": "DENVER", "DOUGLAS": "DENVER",
        "ELBERT": "DENVER", "GILPIN": "DENVER", "JEFFERSON": "DENVER", "PARK": "DENVER",
    },
    "HI": {"HONOLULU": "HONOLULU"},
    "CA": {
        "LOS ANGELES": "LOS_ANGELES", "ORANGE": "LOS_ANGELES",
        "SAN DIEGO": "SAN_DIEGO",
        "ALAMEDA": "SAN_FRANCISCO", "CONTRA COSTA": "SAN_FRANCISCO", "MARIN": "SAN_FRANCISCO",
        "SAN FRANCISCO": "SAN_FRANCISCO", "SAN MATEO": "SAN_FRANCISCO",
    },
    "AZ": {"MARICOPA": "PHOENIX", "PINAL": "PHOENIX"},
    "WA": {"KING": "SEATTLE", "PIERCE": "SEATTLE", "SNOHOMISH": "SEATTLE"},
}

_NORTHEAST = ("CT", "ME", "MA", "NH", "NJ", "NY", "PA", "RI", "VT")
_MIDWEST = ("IL", "IN", "IA", "KS", "MI", "MN", "MO", "NE", "ND", "OH", "SD", "WI")
_SOUTH = (
    "AL", "AR", "DE", "DC", "FL", "GA", "KY", "LA", "MD", "MS",
    "NC", "OK", "SC", "TN", "TX", "VA", "WV",
)
_WEST = ("AK", "AZ", "CA", "CO", "HI", "ID", "MT", "NV", "NM", "OR", "UT", "WA", "WY")

STATE_TO_REGION = {
    **{state: USRegion.NORTHEAST for state in _NORTHEAST},
    **{state: USRegion.MIDWEST for state in _MIDWEST},
    **{state: USRegion.SOUTH for state in _SOUTH},
    **{state: USRegion.WEST for state in _WEST},
}


# =============================================================================
# LOCAL STANDARDS - HOUSING AND UTILITIES
# =============================================================================
# Form B 122A-2, Lines 8-9. Buckets are household sizes 1-4 and 5 (5 or more).


def _bracket(*amounts: str) -> dict[int, Decimal]:
    return {size: D(amount) for size, amount in enumerate(amounts, start=1)}


STATE_HOUSING = {
    "AL": _bracket("1200", "1410", "1470", "1620", "1690"),
    "AK": _bracket("1560", "1850", "1920", "2100", "2190"),
    "AZ": _bracket("1410", "1670", "1740", "1910", "1990"),
    "AR": _bracket("1080", "1280", "1330", "1460", "1520"),
    "CA": _bracket("2430", "2860", "2970", "3260", "3400"),
    "CO": _bracket("1710", "2020", "2100", "2310", "2400"),
    "CT": _bracket("1920", "2260", "2350", "2580", "2690"),
    "DE": _bracket("1440", "1700", "1770", "1940", "2020"),
    "DC": _bracket("2280", "2690", "2800", "3070", "3200"),
    "FL": _bracket("1530", "1800", "1870", "2060", "2150"),
    "GA": _bracket("1350", "1590", "1660", "1820", "1900"),
    "HI": _bracket("2100", "2480", "2580", "2830", "2950"),
    "ID": _bracket("1260", "1490", "1550", "1700", "1770"),
    "IL": _bracket("1470", "1730", "1800", "1980", "2060"),
    "IN": _bracket("1170", "1380", "1440", "1580", "1640"),
    "IA": _bracket("1110", "1310", "1360", "1500", "1560"),
    "KS": _bracket("1170", "1380", "1440", "1580", "1640"),
    "KY": _bracket("1110", "1310", "1360", "1500", "1560"),
    "LA": _bracket("1170", "1380", "1440", "1580", "1640"),
    "ME": _bracket("1350", "1590", "1660", "1820", "1900"),
    "MD": _bracket("1860", "2200", "2290", "2510", "2620"),
    "MA": _bracket("2070", "2440", "2540", "2790", "2910"),
    "MI": _bracket("1230", "1450", "1510", "1660", "1730"),
    "MN": _bracket("1380", "1630", "1690", "1860", "1940"),
    "MS": _bracket("1080", "1280", "1330", "1460", "1520"),
    "MO": _bracket("1170", "1380", "1440", "1580", "1640"),
    "MT": _bracket("1230", "1450", "1510", "1660", "1730"),
    "NE": _bracket("1170", "1380", "1440", "1580", "1640"),
    "NV": _bracket("1440", "1700", "1770", "1940", "2020"),
    "NH": _bracket("1650", "1950", "2030", "2230", "2320"),
    "NJ": _bracket("2010", "2370", "2470", "2710", "2820"),
    "NM": _bracket("1200", "1420", "1480", "1620", "1690"),
    "NY": _bracket("1890", "2230", "2320", "2540", "2650"),
    "NC": _bracket("1290", "1520", "1580", "1740", "1810"),
    "ND": _bracket("1140", "1340", "1400", "1530", "1600"),
    "OH": _bracket("1200", "1410", "1470", "1620", "1690"),
    "OK": _bracket("1110", "1310", "1360", "1500", "1560"),
    "OR": _bracket("1590", "1870", "1950", "2140", "2230"),
    "PA": _bracket("1350", "1590", "1660", "1820", "1900"),
    "RI": _bracket("1620", "1910", "1990", "2180", "2270"),
    "SC": _bracket("1230", "1450", "1510", "1660", "1730"),
    "SD": _bracket("1140", "1340", "1400", "1530", "1600"),
    "TN": _bracket("1200", "1410", "1470", "1620", "1690"),
    "TX": _bracket("1380", "1630", "1690", "1860", "1940"),
    "UT": _bracket("1410", "1660", "1730", "1900", "1980"),
    "VT": _bracket("1500", "1770", "1840", "2020", "2100"),
    "VA": _bracket("1650", "1950", "2030", "2230", "2320"),
    "WA": _bracket("1770", "2090", "2170", "2390", "2490"),
    "WV": _bracket("1050", "1240", "1290", "1420", "1480"),
    "WI": _bracket("1260", "1490", "1550", "1700", "1770"),
    "WY": _bracket("1200", "1420", "1480", "1620", "1690"),
}

# County-level brackets where IRS publishes figures that differ materially
# from the state default. Counties not listed use STATE_HOUSING.
COUNTY_HOUSING = {
    "CA": {
        "LOS ANGELES": _bracket("2744", "3223", "3397", "3776", "3853"),
        "ORANGE": _bracket("3058", "3591", "3785", "4207", "4293"),
        "SAN DIEGO": _bracket("2896", "3401", "3584", "3984", "4065"),
        "SAN FRANCISCO": _bracket("3634", "4268", "4498", "5000", "5102"),
        "SANTA CLARA": _bracket("3518", "4131", "4354", "4840", "4939"),
        "ALAMEDA": _bracket("3113", "3656", "3853", "4283", "4370"),
        "FRESNO": _bracket("1806", "2121", "2235", "2485", "2535"),
    },
    "NY": {
        "NEW YORK": _bracket("3297", "3879", "4089", "4545", "4638"),
        "KINGS": _bracket("2750", "3229", "3403", "3783", "3860"),
        "QUEENS": _bracket("2688", "3157", "3327", "3698", "3773"),
        "BRONX": _bracket("2314", "2718", "2864", "3184", "3249"),
        "WESTCHESTER": _bracket("3021", "3548", "3739", "4156", "4241"),
        "ERIE": _bracket("1573", "1847", "1947", "2164", "2208"),
    },
    "TX": {
        "HARRIS": _bracket("1651", "1939", "2043", "2271", "2317"),
        "DALLAS": _bracket("1715", "2014", "2122", "2359", "2407"),
        "TRAVIS": _bracket("2012", "2363", "2490", "2768", "2824"),
        "BEXAR": _bracket("1522", "1787", "1883", "2093", "2136"),
    },
    "FL": {
        "MIAMI-DADE": _bracket("2296", "2696", "2841", "3158", "3222"),
        "BROWARD": _bracket("2251", "2643", "2785", "3096", "3159"),
        "HILLSBOROUGH": _bracket("1845", "2167", "2284", "2539", "2591"),
    },
    "IL": {
        "COOK": _bracket("1877", "2204", "2323", "2582", "2635"),
        "DUPAGE": _bracket("2091", "2455", "2587", "2876", "2935"),
    },
    "WA": {
        "KING": _bracket("2681", "3148", "3318", "3688", "3763"),
        "SNOHOMISH": _bracket("2277", "2674", "2818", "3133", "3197"),
    },
    "MA": {
        "SUFFOLK": _bracket("2763", "3245", "3420", "3802", "3879"),
        "MIDDLESEX": _bracket("2795", "3282", "3459", "3845", "3923"),
    },
    "GA": {
        "FULTON": _bracket("1802", "2116", "2230", "2479", "2530"),
    },
    "AZ": {
        "MARICOPA": _bracket("1797", "2110", "2224", "2472", "2523"),
    },
    "CO": {
        "DENVER": _bracket("2102", "2469", "2602", "2892", "2951"),
    },
}

# Unmapped states (territories, typos): national default bracket
NATIONAL_HOUSING_DEFAULT = _bracket("1500", "1770", "1840", "2020", "2100")


# =============================================================================
# PRESUMPTION OF ABUSE THRESHOLDS
# =============================================================================
# Form B 122A-2, Line 40. Subject to adjustment every 3 years.

LOWER_THRESHOLD_60 = D("9075")    # $151.25 / month
UPPER_THRESHOLD_60 = D("15150")   # $252.50 / month


STANDARDS_2025_11 = StandardsTables(
    version="2025-11",
    effective_date=date(2025, 4, 1),
    median_income_effective_date=date(2025, 11, 1),
    national_standards=NATIONAL_STANDARDS,
    national_additional_person=NATIONAL_STANDARDS_ADDITIONAL_PERSON,
    health_care_under_65=HEALTH_CARE_UNDER_65,
    health_care_65_and_over=HEALTH_CARE_65_AND_OVER,
    median_income_table=STATE_MEDIAN_INCOME,
    median_fallback_base=MEDIAN_FALLBACK_BASE,
    median_fallback_per_person=MEDIAN_FALLBACK_PER_PERSON,
    vehicle_ownership=VEHICLE_OWNERSHIP,
    public_transportation=PUBLIC_TRANSPORTATION,
    regional_operating=REGIONAL_OPERATING,
    metro_areas=METRO_AREAS,
    county_to_metro=COUNTY_TO_METRO,
    state_to_region=STATE_TO_REGION,
    default_region=USRegion.SOUTH,
    state_housing=STATE_HOUSING,
    county_housing=COUNTY_HOUSING,
    national_housing_default=NATIONAL_HOUSING_DEFAULT,
    lower_threshold_60=LOWER_THRESHOLD_60,
    upper_threshold_60=UPPER_THRESHOLD_60,
    next_adjustment_date=date(2028, 4, 1),
)
