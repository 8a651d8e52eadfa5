"""Static reference tables: ZIP code ranges and telephone area codes per state.

Tables are ordered; that order is the order in which an index tests regions.
"""

from __future__ import annotations

from typing import Final

from mp_regions.kernel.types.state import State

# (state, start, end) -- ``end`` of ``None`` declares a bare prefix.
# Delaware and Maryland carry no ZIP entry.
POSTAL_CODE_TABLE: Final[tuple[tuple[State, str, str | None], ...]] = (
    (State.ALABAMA, "35", "36"),
    (State.ALASKA, "995", "999"),
    (State.ARIZONA, "85", "86"),
    (State.ARKANSAS, "716", "729"),
    (State.CALIFORNIA, "900", "961"),
    (State.COLORADO, "80", "81"),
    (State.CONNECTICUT, "06", None),
    (State.DISTRICT_OF_COLUMBIA, "200", "205"),
    (State.FLORIDA, "32", "34"),
    (State.GEORGIA, "30", "31"),
    (State.HAWAII, "967", "968"),
    (State.IDAHO, "832", "839"),
    (State.ILLINOIS, "60", "62"),
    (State.INDIANA, "46", "47"),
    (State.IOWA, "50", "52"),
    (State.KANSAS, "66", "67"),
    (State.KENTUCKY, "40", "42"),
    (State.LOUISIANA, "700", "715"),
    (State.MAINE, "039", "049"),
    (State.MASSACHUSETTS, "010", "027"),
    (State.MICHIGAN, "48", "49"),
    (State.MINNESOTA, "550", "567"),
    (State.MISSISSIPPI, "386", "399"),
    (State.MISSOURI, "63", "65"),
    (State.MONTANA, "59", None),
    (State.NEBRASKA, "68", "69"),
    (State.NEVADA, "889", "899"),
    (State.NEW_HAMPSHIRE, "030", "038"),
    (State.NEW_JERSEY, "07", "08"),
    (State.NEW_MEXICO, "870", "884"),
    (State.NEW_YORK, "10", "14"),
    (State.NORTH_CAROLINA, "27", "28"),
    (State.NORTH_DAKOTA, "58", None),
    (State.OHIO, "43", "45"),
    (State.OKLAHOMA, "73", "74"),
    (State.OREGON, "97", None),
    (State.PENNSYLVANIA, "150", "196"),
    (State.RHODE_ISLAND, "028", "029"),
    (State.SOUTH_CAROLINA, "29", None),
    (State.SOUTH_DAKOTA, "57", None),
    (State.TENNESSEE, "370", "385"),
    (State.TEXAS, "75", "79"),
    (State.UTAH, "84", None),
    (State.VERMONT, "05", None),
    (State.VIRGINIA, "220", "246"),
    (State.WASHINGTON, "980", "984"),
    (State.WEST_VIRGINIA, "247", "269"),
    (State.WISCONSIN, "53", "54"),
    (State.WYOMING, "820", "831"),
)

AREA_CODE_TABLE: Final[tuple[tuple[State, tuple[int, ...]], ...]] = (
    (State.ALABAMA, (205, 251, 256, 334, 659, 938)),
    (State.ALASKA, (907,)),
    (State.ARIZONA, (480, 520, 602, 623, 928)),
    (State.ARKANSAS, (479, 501, 870)),
    (State.CALIFORNIA, (
        209, 213, 279, 310, 323, 341, 350, 408, 415, 424, 442, 510, 530, 559, 562, 619, 626,
        628, 650, 657, 661, 669, 707, 714, 747, 760, 805, 818, 820, 831, 840, 858, 909, 916,
        925, 949, 951,
    )),
    (State.COLORADO, (303, 719, 720, 970, 983)),
    (State.CONNECTICUT, (203, 475, 860, 959)),
    (State.DELAWARE, (302,)),
    (State.DISTRICT_OF_COLUMBIA, (202, 771)),
    (State.FLORIDA, (
        239, 305, 321, 352, 386, 407, 448, 561, 656, 689, 727, 754, 772, 786, 813, 850, 863,
        904, 941, 954,
    )),
    (State.GEORGIA, (229, 404, 470, 478, 678, 706, 762, 770, 912, 943)),
    (State.HAWAII, (808,)),
    (State.IDAHO, (208, 986)),
    (State.ILLINOIS, (217, 224, 309, 312, 331, 447, 464, 618, 630, 708, 773, 779, 815, 847, 872)),
    (State.INDIANA, (219, 260, 317, 463, 574, 765, 812, 930)),
    (State.IOWA, (319, 515, 563, 641, 712)),
    (State.KANSAS, (316, 620, 785, 913)),
    (State.KENTUCKY, (270, 364, 502, 606, 859)),
    (State.LOUISIANA, (225, 318, 337, 504, 985)),
    (State.MAINE, (207,)),
    (State.MARYLAND, (240, 301, 410, 443, 667)),
    (State.MASSACHUSETTS, (339, 351, 413, 508, 617, 774, 781, 857, 978)),
    (State.MICHIGAN, (231, 248, 269, 313, 517, 586, 616, 734, 810, 906, 947, 989)),
    (State.MINNESOTA, (218, 320, 507, 612, 651, 763, 952)),
    (State.MISSISSIPPI, (228, 601, 662, 769)),
    (State.MISSOURI, (314, 417, 557, 573, 636, 660, 816)),
    (State.MONTANA, (406,)),
    (State.NEBRASKA, (308, 402, 531)),
    (State.NEVADA, (702, 725, 775)),
    (State.NEW_HAMPSHIRE, (603,)),
    (State.NEW_JERSEY, (201, 551, 609, 640, 732, 848, 856, 862, 908, 973)),
    (State.NEW_MEXICO, (505, 575)),
    (State.NEW_YORK, (
        212, 315, 332, 347, 363, 516, 518, 585, 607, 631, 646, 680, 716, 718, 838, 845, 914,
        917, 929, 934,
    )),
    (State.NORTH_CAROLINA, (252, 336, 472, 704, 743, 828, 910, 919, 980, 984)),
    (State.NORTH_DAKOTA, (701,)),
    (State.OHIO, (216, 220, 234, 326, 330, 380, 419, 440, 513, 567, 614, 740, 937)),
    (State.OKLAHOMA, (405, 539, 572, 580, 918)),
    (State.OREGON, (458, 503, 541, 971)),
    (State.PENNSYLVANIA, (
        215, 223, 267, 272, 412, 445, 484, 570, 582, 610, 717, 724, 814, 835, 878,
    )),
    (State.RHODE_ISLAND, (401,)),
    (State.SOUTH_CAROLINA, (803, 839, 843, 854, 864)),
    (State.SOUTH_DAKOTA, (605,)),
    (State.TENNESSEE, (423, 615, 629, 731, 865, 901, 931)),
    (State.TEXAS, (
        210, 214, 254, 281, 325, 346, 361, 409, 430, 432, 469, 512, 682, 713, 726, 737, 806,
        817, 830, 832, 903, 915, 936, 940, 945, 956, 972, 979,
    )),
    (State.UTAH, (385, 435, 801)),
    (State.VERMONT, (802,)),
    (State.VIRGINIA, (276, 434, 540, 571, 703, 757, 804, 826, 948)),
    (State.WASHINGTON, (206, 253, 360, 425, 509, 564)),
    (State.WEST_VIRGINIA, (304, 681)),
    (State.WISCONSIN, (262, 414, 534, 608, 715, 920)),
    (State.WYOMING, (307,)),
)


__all__ = ["AREA_CODE_TABLE", "POSTAL_CODE_TABLE"]
