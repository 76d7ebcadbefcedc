#!/usr/bin/env python3
# ip_globe/world.py
"""
Embedded world outline for the ASCII globe.

Coastlines are stored as polylines of (lat, lon) pairs, coarse enough to stay
readable at ~120x30 characters. Nothing here is computed; the table is a
constant data asset loaded once at import.

A polyline never crosses the antimeridian. Coasts that do (Chukotka,
Antarctica) are split at ±180.
"""

from typing import Tuple

LatLon = Tuple[float, float]
Polyline = Tuple[LatLon, ...]

__all__ = ["OUTLINES", "LatLon", "Polyline"]

# ----------------------------
# Americas
# ----------------------------

_NORTH_AMERICA: Polyline = (
    (71.3, -156.8), (70.1, -143.0), (69.5, -133.0), (68.8, -120.0),
    (67.8, -108.0), (68.6, -97.0), (66.5, -87.0), (64.0, -88.0),
    (60.0, -94.5), (57.0, -92.5), (55.0, -82.5), (51.5, -79.5),
    (55.5, -77.0), (58.5, -78.0), (62.5, -78.0), (61.0, -70.0),
    (58.5, -67.5), (60.0, -64.5), (55.5, -60.5), (52.0, -56.0),
    (47.5, -53.0), (45.0, -61.0), (44.0, -66.0), (42.0, -70.0),
    (41.0, -72.0), (39.0, -74.0), (35.0, -75.5), (32.0, -81.0),
    (30.0, -81.4), (27.0, -80.0), (25.2, -80.5), (26.0, -82.0),
    (29.5, -83.5), (30.0, -85.0), (30.3, -88.0), (29.0, -89.5),
    (29.5, -94.0), (28.0, -96.8), (25.9, -97.2), (22.0, -97.8),
    (19.0, -96.0), (18.5, -94.5), (18.5, -91.0), (21.5, -90.0),
    (21.5, -87.0), (18.0, -88.0), (16.0, -88.5), (15.8, -84.0),
    (11.0, -83.6), (9.0, -81.5), (9.5, -79.0), (7.5, -77.5),
    (7.5, -80.0), (8.5, -83.0), (10.0, -85.7), (12.5, -87.5),
    (14.0, -91.5), (16.0, -95.0), (17.0, -100.0), (19.0, -105.0),
    (22.5, -106.0), (26.0, -109.5), (31.5, -114.5), (28.0, -114.0),
    (23.0, -110.0), (24.5, -112.0), (28.0, -114.5), (32.5, -117.0),
    (34.5, -120.5), (38.0, -123.0), (40.5, -124.3), (46.0, -124.0),
    (48.5, -124.7), (51.0, -127.5), (54.5, -130.5), (58.5, -137.0),
    (60.0, -146.0), (59.0, -152.0), (56.0, -159.0), (54.8, -164.0),
    (58.0, -162.0), (60.5, -165.0), (63.5, -164.5), (65.5, -168.0),
    (68.0, -166.0), (70.5, -161.0), (71.3, -156.8),
)

_GREENLAND: Polyline = (
    (83.5, -35.0), (82.0, -20.0), (78.0, -18.5), (75.0, -19.0),
    (70.5, -22.0), (68.0, -29.0), (65.5, -37.5), (61.0, -42.5),
    (60.0, -44.0), (61.0, -48.0), (65.0, -52.5), (69.0, -53.0),
    (70.5, -54.0), (75.5, -58.0), (77.5, -70.0), (79.0, -69.0),
    (82.0, -60.0), (83.5, -35.0),
)

_BAFFIN: Polyline = (
    (73.5, -80.0), (70.5, -68.0), (66.5, -61.5), (62.5, -65.0),
    (64.5, -72.0), (66.0, -74.0), (68.5, -77.0), (70.0, -86.0),
    (73.5, -80.0),
)

_CUBA: Polyline = (
    (23.2, -82.5), (22.0, -78.0), (20.0, -74.2), (19.8, -77.5),
    (21.8, -81.5), (22.0, -84.9), (23.2, -82.5),
)

_SOUTH_AMERICA: Polyline = (
    (12.0, -72.0), (11.0, -75.0), (8.8, -76.8), (7.5, -77.5),
    (4.0, -77.3), (1.0, -79.0), (-2.5, -80.5), (-5.0, -81.2),
    (-10.0, -78.3), (-14.0, -76.3), (-18.5, -70.3), (-23.0, -70.5),
    (-30.0, -71.5), (-37.0, -73.5), (-42.0, -73.8), (-46.0, -75.5),
    (-50.0, -75.3), (-53.0, -73.5), (-55.0, -69.0), (-54.8, -65.0),
    (-52.5, -68.5), (-50.0, -68.5), (-46.5, -67.5), (-42.5, -63.5),
    (-40.8, -62.2), (-38.5, -58.0), (-36.3, -56.8), (-34.8, -56.5),
    (-34.0, -53.5), (-30.0, -50.3), (-25.5, -48.5), (-23.0, -43.2),
    (-22.5, -41.0), (-18.0, -39.3), (-13.0, -38.5), (-8.5, -35.0),
    (-5.2, -35.5), (-3.0, -40.0), (-2.5, -44.3), (-1.0, -48.5),
    (1.5, -50.0), (4.5, -51.7), (6.0, -57.0), (8.5, -60.0),
    (10.6, -61.8), (10.5, -66.0), (11.5, -71.0), (12.0, -72.0),
)

# ----------------------------
# Europe, Asia, Africa
# ----------------------------

_EURASIA: Polyline = (
    # Iberia to Scandinavia
    (36.0, -5.6), (37.0, -8.9), (38.7, -9.5), (43.0, -9.3),
    (43.5, -8.0), (43.4, -2.0), (46.0, -1.2), (47.5, -2.8),
    (48.6, -4.7), (48.7, -1.6), (49.5, 0.2), (50.9, 1.6),
    (51.5, 3.5), (53.4, 5.5), (53.6, 8.5), (57.0, 8.3),
    (57.7, 10.5), (54.5, 10.8), (54.0, 14.0), (54.6, 18.5),
    (56.0, 21.0), (57.5, 21.6), (59.4, 24.0), (60.3, 29.0),
    (60.5, 22.3), (63.0, 21.4), (65.5, 25.3), (65.8, 22.5),
    (63.5, 19.5), (61.0, 17.2), (59.3, 18.5), (56.2, 16.0),
    (55.5, 13.0), (58.0, 11.8), (59.0, 10.6), (58.0, 7.0),
    (59.0, 5.5), (62.0, 5.0), (64.0, 10.0), (67.5, 14.5),
    (70.0, 19.0), (71.0, 25.5), (70.0, 31.0), (69.0, 33.5),
    # Arctic Russia
    (66.5, 40.5), (64.5, 40.0), (67.5, 44.0), (68.5, 53.0),
    (69.5, 60.0), (70.5, 67.0), (73.0, 70.0), (72.5, 80.0),
    (75.0, 87.0), (77.5, 104.0), (76.0, 113.0), (73.5, 113.5),
    (73.0, 127.0), (71.5, 131.0), (72.0, 140.0), (71.0, 152.0),
    (70.0, 160.0), (69.5, 170.0), (67.0, 180.0),
)

_EAST_ASIA: Polyline = (
    (65.0, 180.0), (64.5, 178.0), (62.5, 179.0), (60.0, 170.0),
    (59.0, 163.0), (56.0, 162.0), (51.0, 156.7), (55.0, 155.8),
    (59.0, 155.0), (59.3, 143.0), (54.0, 141.0), (53.5, 138.0),
    (48.5, 140.3), (43.0, 132.0), (39.5, 128.0), (37.5, 129.5),
    (35.0, 129.0), (34.8, 126.3), (37.5, 126.5), (39.5, 125.0),
    (40.5, 121.0), (39.0, 121.5), (40.0, 119.5), (38.5, 117.7),
    (37.0, 119.0), (37.4, 122.5), (35.0, 119.4), (32.0, 121.8),
    (30.0, 122.0), (27.0, 120.5), (24.5, 118.5), (22.5, 114.0),
    (21.5, 110.0), (20.5, 110.3), (21.5, 108.0), (19.0, 105.7),
    (16.0, 108.3), (12.0, 109.2), (10.5, 107.0), (8.7, 104.8),
    (10.5, 104.5), (12.5, 101.0), (13.5, 100.2), (10.5, 99.3),
    (7.0, 100.5), (3.0, 101.3), (1.3, 103.8), (2.5, 101.8),
    (6.0, 100.3), (8.0, 98.3), (12.0, 98.6), (16.5, 97.6),
    (16.0, 94.5), (19.0, 94.0), (22.0, 91.8), (22.5, 89.0),
    (21.5, 87.0), (19.5, 85.0), (16.0, 81.3), (13.0, 80.3),
    (10.0, 79.8), (8.1, 77.5), (10.0, 76.2), (15.0, 74.0),
    (20.0, 72.8), (22.5, 70.0), (23.5, 68.3), (25.0, 66.5),
    (25.3, 61.5), (25.5, 57.3), (27.0, 56.5), (26.5, 54.0),
    (24.5, 52.0), (26.0, 50.5), (29.0, 48.5), (29.5, 48.0),
    # Arabia
    (27.0, 49.7), (25.0, 50.7), (24.2, 51.6), (24.0, 54.0),
    (25.7, 56.3), (22.5, 59.8), (19.0, 57.7), (17.0, 54.0),
    (14.5, 49.0), (12.7, 45.0), (13.5, 43.2), (16.5, 42.7),
    (20.0, 40.8), (24.0, 38.2), (28.0, 34.6), (29.5, 34.9),
    (28.0, 34.4), (29.9, 32.6),
    # Levant and the Mediterranean
    (31.5, 34.5), (33.0, 35.1), (35.5, 35.8), (36.7, 36.2),
    (36.5, 30.5), (37.0, 27.5), (40.0, 26.2), (40.5, 23.0),
    (38.5, 24.0), (37.0, 22.0), (38.3, 21.2), (40.0, 19.5),
    (42.0, 19.2), (44.0, 15.5), (45.6, 13.7), (44.0, 12.5),
    (42.0, 14.5), (40.0, 18.5), (38.0, 16.0), (38.2, 15.6),
    (40.0, 15.5), (41.7, 12.5), (43.0, 10.5), (44.3, 9.0),
    (43.2, 6.0), (43.5, 3.5), (42.3, 3.2), (41.0, 1.0),
    (39.5, -0.3), (37.5, -0.7), (36.7, -2.2), (36.7, -4.4),
    (36.0, -5.6),
)

_CHUKOTKA: Polyline = (
    (67.0, -180.0), (66.0, -171.0), (64.5, -172.5), (65.0, -180.0),
)

_BLACK_SEA: Polyline = (
    (41.2, 29.0), (41.5, 32.0), (42.0, 35.0), (41.0, 38.0),
    (41.5, 41.5), (43.5, 40.0), (45.0, 37.0), (45.5, 33.5),
    (44.5, 33.5), (46.5, 31.0), (45.0, 29.6), (43.0, 27.9),
    (41.2, 29.0),
)

_CASPIAN: Polyline = (
    (46.8, 49.0), (45.0, 47.0), (43.0, 47.5), (40.5, 50.0),
    (37.3, 49.0), (37.0, 54.0), (40.0, 53.0), (41.5, 52.5),
    (44.6, 50.4), (46.8, 53.0), (46.8, 49.0),
)

_BRITAIN: Polyline = (
    (58.6, -3.0), (57.5, -1.8), (55.8, -2.0), (54.0, -0.2),
    (53.0, 0.3), (51.5, 1.4), (50.8, 0.3), (50.6, -2.0),
    (50.0, -5.5), (51.5, -5.0), (51.7, -3.0), (52.5, -4.1),
    (53.3, -3.0), (54.5, -3.4), (55.0, -5.0), (56.5, -5.6),
    (58.5, -5.0), (58.6, -3.0),
)

_IRELAND: Polyline = (
    (55.2, -7.3), (54.0, -10.0), (51.6, -10.0), (51.8, -8.0),
    (52.5, -6.3), (54.0, -6.0), (55.2, -7.3),
)

_ICELAND: Polyline = (
    (66.5, -16.0), (65.0, -13.5), (63.4, -18.5), (64.0, -22.5),
    (65.5, -24.0), (66.5, -22.5), (66.5, -16.0),
)

_JAPAN: Polyline = (
    (45.5, 141.8), (43.3, 145.5), (42.0, 143.0), (41.4, 141.5),
    (39.0, 142.0), (35.7, 140.8), (34.6, 138.8), (33.5, 135.5),
    (31.0, 131.0), (31.5, 130.2), (33.6, 130.0), (34.5, 131.5),
    (35.5, 135.0), (37.0, 137.0), (38.5, 139.5), (41.2, 140.2),
    (43.0, 140.3), (45.5, 141.8),
)

_SRI_LANKA: Polyline = (
    (9.8, 80.0), (7.0, 81.9), (6.0, 80.2), (8.0, 79.8), (9.8, 80.0),
)

_AFRICA: Polyline = (
    (35.8, -5.9), (35.0, -2.0), (36.8, 3.0), (37.0, 10.0),
    (36.8, 11.0), (35.5, 11.0), (33.5, 11.0), (30.5, 19.5),
    (32.0, 20.0), (32.8, 22.5), (31.5, 25.0), (31.0, 29.0),
    (31.3, 32.0), (29.9, 32.5), (27.5, 33.8), (22.0, 36.8),
    (18.0, 38.5), (15.5, 39.5), (12.5, 43.3), (11.8, 43.5),
    (11.8, 51.2), (10.0, 51.0), (4.0, 47.5), (-2.0, 41.0),
    (-6.0, 39.0), (-10.5, 40.4), (-15.0, 40.7), (-20.0, 34.8),
    (-25.0, 35.5), (-26.0, 32.8), (-29.5, 31.2), (-33.0, 27.9),
    (-34.0, 25.0), (-34.8, 20.0), (-34.2, 18.4), (-31.5, 18.2),
    (-28.6, 16.5), (-22.0, 14.3), (-17.3, 11.8), (-12.5, 13.6),
    (-8.5, 13.2), (-6.0, 12.2), (-1.0, 9.0), (2.0, 9.8),
    (4.0, 9.0), (4.3, 7.0), (6.4, 3.5), (6.0, 1.2),
    (5.0, -2.0), (4.4, -7.5), (7.0, -11.5), (9.5, -13.5),
    (12.0, -16.7), (14.7, -17.4), (18.0, -16.0), (21.0, -17.0),
    (24.0, -16.0), (27.5, -13.0), (30.0, -9.7), (32.5, -9.3),
    (35.8, -5.9),
)

_MADAGASCAR: Polyline = (
    (-12.0, 49.3), (-15.5, 50.3), (-20.0, 48.9), (-25.5, 45.2),
    (-24.5, 43.6), (-21.0, 43.6), (-16.0, 44.5), (-13.5, 48.0),
    (-12.0, 49.3),
)

# ----------------------------
# Maritime Southeast Asia and Oceania
# ----------------------------

_LUZON: Polyline = (
    (18.5, 120.8), (16.0, 122.2), (13.8, 124.0), (13.0, 121.5),
    (14.5, 120.5), (16.5, 120.3), (18.5, 120.8),
)

_MINDANAO: Polyline = (
    (9.5, 125.5), (7.0, 126.5), (6.0, 125.3), (7.0, 122.0),
    (8.5, 123.5), (9.5, 125.5),
)

_SUMATRA: Polyline = (
    (5.5, 95.3), (3.0, 98.5), (-1.0, 104.0), (-3.5, 106.0),
    (-5.8, 105.8), (-4.0, 103.5), (-1.0, 100.5), (2.0, 98.0),
    (5.5, 95.3),
)

_BORNEO: Polyline = (
    (7.0, 116.8), (4.0, 118.0), (1.0, 119.0), (-3.5, 116.0),
    (-3.5, 114.0), (-2.9, 110.5), (1.5, 109.0), (2.0, 111.5),
    (4.5, 114.0), (7.0, 116.8),
)

_JAVA: Polyline = (
    (-6.0, 106.0), (-6.8, 110.5), (-7.0, 112.7), (-8.5, 114.5),
    (-8.7, 111.0), (-7.5, 106.5), (-6.0, 106.0),
)

_NEW_GUINEA: Polyline = (
    (-0.8, 131.0), (-2.5, 134.0), (-2.6, 141.0), (-5.5, 146.0),
    (-8.0, 147.8), (-10.5, 150.5), (-9.0, 147.0), (-8.0, 143.5),
    (-9.1, 141.0), (-7.5, 138.8), (-4.0, 135.0), (-3.9, 132.8),
    (-0.8, 131.0),
)

_AUSTRALIA: Polyline = (
    (-10.7, 142.5), (-14.5, 144.0), (-19.0, 146.5), (-22.5, 150.5),
    (-28.0, 153.5), (-32.5, 152.5), (-37.5, 150.0), (-39.0, 146.3),
    (-38.0, 141.0), (-35.5, 138.2), (-32.5, 137.7), (-34.8, 135.8),
    (-32.0, 133.0), (-31.5, 129.0), (-33.8, 124.0), (-34.0, 120.0),
    (-35.0, 117.8), (-34.3, 115.0), (-31.5, 115.7), (-27.0, 113.5),
    (-22.0, 113.7), (-20.5, 117.0), (-19.5, 121.0), (-16.5, 122.5),
    (-14.0, 126.5), (-15.0, 129.0), (-12.2, 131.0), (-11.2, 132.6),
    (-12.3, 136.5), (-15.0, 135.5), (-17.5, 140.5), (-12.5, 141.7),
    (-10.7, 142.5),
)

_NZ_NORTH: Polyline = (
    (-34.5, 172.7), (-37.5, 176.0), (-37.6, 178.5), (-39.5, 177.0),
    (-41.6, 175.2), (-39.5, 174.0), (-37.0, 174.5), (-34.5, 172.7),
)

_NZ_SOUTH: Polyline = (
    (-40.5, 172.7), (-42.0, 174.0), (-44.0, 173.0), (-46.6, 169.0),
    (-46.0, 166.5), (-44.0, 168.2), (-41.5, 172.0), (-40.5, 172.7),
)

_ANTARCTICA: Polyline = (
    (-78.0, -180.0), (-72.0, -150.0), (-74.0, -120.0), (-72.0, -100.0),
    (-73.0, -80.0), (-65.0, -63.0), (-70.0, -60.0), (-78.0, -45.0),
    (-73.0, -20.0), (-70.0, 0.0), (-69.0, 30.0), (-67.0, 60.0),
    (-66.0, 90.0), (-66.0, 120.0), (-67.0, 145.0), (-71.0, 170.0),
    (-78.0, 180.0),
)

OUTLINES: Tuple[Polyline, ...] = (
    _NORTH_AMERICA,
    _GREENLAND,
    _BAFFIN,
    _CUBA,
    _SOUTH_AMERICA,
    _EURASIA,
    _EAST_ASIA,
    _CHUKOTKA,
    _BLACK_SEA,
    _CASPIAN,
    _BRITAIN,
    _IRELAND,
    _ICELAND,
    _JAPAN,
    _SRI_LANKA,
    _AFRICA,
    _MADAGASCAR,
    _LUZON,
    _MINDANAO,
    _SUMATRA,
    _BORNEO,
    _JAVA,
    _NEW_GUINEA,
    _AUSTRALIA,
    _NZ_NORTH,
    _NZ_SOUTH,
    _ANTARCTICA,
)
