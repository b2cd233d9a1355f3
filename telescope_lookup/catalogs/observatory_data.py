"""
Observatory Catalog Data

Well-known observatories as tabulated by the SLALIB observatory routine:
- Mnemonic (upper case)
- Full name
- Longitude, WEST positive, sexagesimal degrees
- Geodetic latitude, sexagesimal degrees
- Height above the ellipsoid in metres
"""

# Format: (mnemonic, full_name, west_longitude_dms, latitude_dms, height_m)
OBSERVATORY_DATA = [
    # Anglo-Australian Observatory, Siding Spring
    ("AAT", "Anglo-Australian 3.9m Telescope", "-149 03 57.91", "-31 16 37.34", 1164.0),

    # Roque de los Muchachos, La Palma
    ("LPO4.2", "William Herschel 4.2m Telescope", "17 52 53.9", "28 45 38.1", 2332.0),
    ("LPO2.5", "Isaac Newton 2.5m Telescope", "17 52 39.5", "28 45 43.2", 2336.0),
    ("LPO1", "Jacobus Kapteyn 1m Telescope", "17 52 41.2", "28 45 39.9", 2364.0),

    ("MMT", "MMT 6.5m, Mt Hopkins", "110 53 04.4", "31 41 19.6", 2608.0),

    # European Southern Observatory, La Silla
    ("ESO3.6", "ESO 3.6 metre", "70 43 36.0", "-29 15 36.0", 2428.0),
    ("ESONTT", "ESO 3.5 metre NTT", "70 43 07.0", "-29 15 30.0", 2377.0),

    # Mauna Kea
    ("MAUNAK88", "Mauna Kea 88 inch", "155 28 09.96", "19 49 22.77", 4213.6),
    ("UKIRT", "UK Infra Red Telescope", "155 28 13.18", "19 49 20.75", 4198.5),
    ("JCMT", "JCMT 15 metre", "155 28 37.20", "19 49 22.11", 4111.0),
    ("KECK1", "Keck 10m Telescope #1", "155 28 28.99", "19 49 33.41", 4160.0),
    ("KECK2", "Keck 10m Telescope #2", "155 28 27.24", "19 49 35.62", 4159.6),
    ("SUBARU", "Subaru 8m telescope", "155 28 33.67", "19 49 31.81", 4163.0),
    ("CFHT", "Canada-France-Hawaii 3.6m Telescope", "155 28 07.95", "19 49 30.91", 4204.1),
    ("GEMININ", "Gemini North 8-m telescope", "155 28 08.56", "19 49 25.69", 4213.4),
    ("IRTF", "NASA IR Telescope Facility, Mauna Kea", "155 28 19.20", "19 49 34.39", 4168.1),
    ("CSO", "Caltech Sub-mm Observatory, Mauna Kea", "155 28 31.79", "19 49 20.78", 4080.0),

    ("VLA", "Very Large Array", "107 37 03.82", "34 04 43.497", 2124.0),
    ("PARKES", "Parkes Radio Telescope", "-148 15 44.3591", "-32 59 59.8657", 391.79),
    ("ARECIBO", "Arecibo 1000 foot", "66 45 11.1", "18 20 36.6", 496.0),
    ("JODRELL1", "Jodrell Bank 250 foot", "2 18 25.0", "53 14 10.5", 78.0),
    ("EFFELSBERG", "Effelsberg 100 metre", "-6 53 01.5", "50 31 28.6", 366.8),
    ("PALOMAR200", "Mount Palomar 200 inch", "116 51 50.0", "33 21 22.0", 1706.0),
    ("GEMINIS", "Gemini South 8-m telescope", "70 44 11.5", "-30 14 26.7", 2738.0),
    ("VLT1", "ESO VLT, Paranal, Chile: UT1", "70 24 11.642", "-24 37 33.117", 2635.43),
]

# Minor Planet Center observatory codes of catalog sites
OBSERVATORY_CODES = {
    "AAT": "413",
    "LPO4.2": "950",
    "LPO2.5": "950",
    "LPO1": "950",
    "ESO3.6": "809",
    "ESONTT": "809",
    "MAUNAK88": "568",
    "UKIRT": "568",
    "JCMT": "568",
    "KECK1": "568",
    "KECK2": "568",
    "SUBARU": "568",
    "CFHT": "568",
    "GEMININ": "568",
    "IRTF": "568",
    "CSO": "568",
    "ARECIBO": "251",
    "PALOMAR200": "675",
    "VLT1": "309",
}
