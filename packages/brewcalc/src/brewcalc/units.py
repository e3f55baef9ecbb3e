"""
Plain scalar aliases for brewing measurements.

These carry no invariant beyond being a float. Quantities that need
validation have dedicated types in brewcalc.quantities.
"""

# Value as in decimal * 100
Percent = float
# Value as in decimal * 1e6
PartsPerMillion = float
# pH value, 7 is neutral
PH = float
# International bitterness units
Ibu = float
# Standard Reference Method colour
SRMColor = float
# Carbonation in volumes of CO2
VolumesCO2 = float
# Alcohol by volume in percent
Abv = Percent
Celsius = float
Liters = float
Kilograms = float
Minutes = float
Days = float
