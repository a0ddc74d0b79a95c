"""
Static gazetteer of named places in the Greater St. Louis metro area.

Entries are matched lexically by `src.services.geocoding`. The table is ordered:
when two candidates score the same, the one listed first wins. Some places appear
more than once (under a neighborhood and a landmark heading, for example); that is
harmless because duplicates resolve to the same coordinate.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Tuple

from src.services.geofence import GeoPoint

PlaceType = Literal["intersection", "bridge", "landmark", "neighborhood", "city", "road"]


@dataclass(frozen=True)
class GazetteerEntry:
    name: str
    aliases: Tuple[str, ...]
    location: GeoPoint
    place_type: PlaceType


def _entry(name: str, aliases: Tuple[str, ...], lat: float, lng: float, place_type: PlaceType) -> GazetteerEntry:
    return GazetteerEntry(name=name, aliases=aliases, location=GeoPoint(lat, lng), place_type=place_type)


GAZETTEER: Tuple[GazetteerEntry, ...] = (
    # Neighborhoods - St. Louis City
    _entry("Downtown", ("downtown st. louis", "downtown stl", "city center"), 38.6270, -90.1994, "neighborhood"),
    _entry("Central West End", ("cwe", "central west end"), 38.6434, -90.2613, "neighborhood"),
    _entry("Forest Park", ("forest park",), 38.6377, -90.2854, "neighborhood"),
    _entry("Tower Grove", ("tower grove south", "tower grove east", "tower grove"), 38.6047, -90.2553, "neighborhood"),
    _entry("Soulard", ("soulard",), 38.6086, -90.2108, "neighborhood"),
    _entry("The Hill", ("the hill", "italian hill"), 38.6174, -90.2755, "neighborhood"),
    _entry("Lafayette Square", ("lafayette square", "lafayette park"), 38.6153, -90.2233, "neighborhood"),
    _entry("Cherokee Street", ("cherokee", "cherokee street"), 38.5972, -90.2397, "neighborhood"),
    _entry("Benton Park", ("benton park",), 38.5997, -90.2222, "neighborhood"),
    _entry("South City", ("south city", "south st. louis", "south stl"), 38.5750, -90.2500, "neighborhood"),
    _entry("North City", ("north city", "north st. louis", "north stl"), 38.6800, -90.2100, "neighborhood"),
    _entry("Shaw", ("shaw neighborhood", "shaw"), 38.6189, -90.2497, "neighborhood"),
    _entry("Dogtown", ("dogtown", "clayton-tamm"), 38.6292, -90.3000, "neighborhood"),
    _entry("The Grove", ("the grove", "grove"), 38.6317, -90.2439, "neighborhood"),
    _entry("Grand Center", ("grand center", "midtown"), 38.6400, -90.2333, "neighborhood"),
    _entry("Carondelet", ("carondelet",), 38.5558, -90.2550, "neighborhood"),
    _entry("Dutchtown", ("dutchtown",), 38.5750, -90.2350, "neighborhood"),
    _entry("Holly Hills", ("holly hills",), 38.5558, -90.2667, "neighborhood"),
    _entry("Baden", ("baden",), 38.7258, -90.1908, "neighborhood"),
    _entry("Walnut Park", ("walnut park",), 38.7117, -90.2475, "neighborhood"),
    _entry("Penrose", ("penrose",), 38.6892, -90.2294, "neighborhood"),
    _entry("Fairground", ("fairground", "fairgrounds"), 38.6650, -90.2133, "neighborhood"),
    _entry("Old North", ("old north st. louis", "old north"), 38.6625, -90.2003, "neighborhood"),
    _entry("Hyde Park", ("hyde park",), 38.6600, -90.2050, "neighborhood"),
    _entry("Skinker DeBaliviere", ("skinker debaliviere", "skinker-debaliviere"), 38.6508, -90.2833, "neighborhood"),
    _entry("Bevo Mill", ("bevo mill", "bevo"), 38.5700, -90.2500, "neighborhood"),
    _entry("Gravois Park", ("gravois park",), 38.5900, -90.2400, "neighborhood"),
    _entry("Marine Villa", ("marine villa",), 38.5800, -90.2200, "neighborhood"),
    _entry("McKinley Heights", ("mckinley heights",), 38.6000, -90.2200, "neighborhood"),
    _entry("Benton Park West", ("benton park west",), 38.6000, -90.2300, "neighborhood"),
    _entry("Fox Park", ("fox park",), 38.6100, -90.2300, "neighborhood"),
    _entry("Lafayette Square", ("lafayette square", "lafayette park"), 38.6153, -90.2233, "neighborhood"),
    _entry("Peabody Darst Webbe", ("peabody darst webbe", "peabody"), 38.6200, -90.2100, "neighborhood"),
    _entry("Gate District", ("gate district",), 38.6250, -90.2100, "neighborhood"),
    _entry("Lucas Park", ("lucas park",), 38.6300, -90.2000, "neighborhood"),
    _entry("Downtown West", ("downtown west",), 38.6300, -90.2100, "neighborhood"),
    _entry("Downtown", ("downtown st. louis", "downtown stl", "city center"), 38.6270, -90.1994, "neighborhood"),
    _entry("Carr Square", ("carr square",), 38.6400, -90.2000, "neighborhood"),
    _entry("Columbus Square", ("columbus square",), 38.6450, -90.2000, "neighborhood"),
    _entry("Old North St. Louis", ("old north st. louis", "old north"), 38.6625, -90.2003, "neighborhood"),
    _entry("St. Louis Place", ("st. louis place",), 38.6700, -90.2000, "neighborhood"),
    _entry("Jeff Vanderlou", ("jeff vanderlou", "jvl"), 38.6800, -90.2100, "neighborhood"),
    _entry("Ville", ("the ville",), 38.6900, -90.2200, "neighborhood"),
    _entry("Kingsway West", ("kingsway west",), 38.7000, -90.2300, "neighborhood"),
    _entry("Kingsway East", ("kingsway east",), 38.7000, -90.2400, "neighborhood"),
    _entry("Fountain Park", ("fountain park",), 38.7100, -90.2500, "neighborhood"),
    _entry("Academy", ("academy",), 38.7200, -90.2600, "neighborhood"),
    _entry("Kings Oak", ("kings oak",), 38.7300, -90.2700, "neighborhood"),
    _entry("Mark Twain", ("mark twain",), 38.7400, -90.2800, "neighborhood"),
    _entry("Mark Twain I-70 Industrial", ("mark twain industrial",), 38.7500, -90.2900, "neighborhood"),
    _entry("College Hill", ("college hill",), 38.6600, -90.2400, "neighborhood"),
    _entry("Fairground", ("fairground", "fairgrounds"), 38.6650, -90.2133, "neighborhood"),
    _entry("O'Fallon", ("o'fallon neighborhood", "ofallon neighborhood"), 38.6800, -90.2200, "neighborhood"),
    _entry("Penrose", ("penrose",), 38.6892, -90.2294, "neighborhood"),
    _entry("Walnut Park East", ("walnut park east",), 38.7117, -90.2475, "neighborhood"),
    _entry("Walnut Park West", ("walnut park west",), 38.7117, -90.2500, "neighborhood"),
    _entry("Baden", ("baden",), 38.7258, -90.1908, "neighborhood"),
    _entry("Riverview", ("riverview",), 38.7500, -90.2000, "neighborhood"),
    _entry("Near North Riverfront", ("near north riverfront", "riverfront"), 38.7600, -90.1900, "neighborhood"),
    _entry("Hyde Park", ("hyde park",), 38.6600, -90.2050, "neighborhood"),
    _entry("Near South Side", ("near south side", "near south"), 38.6000, -90.2200, "neighborhood"),
    _entry("Midtown", ("midtown", "grand center"), 38.6400, -90.2333, "neighborhood"),
    _entry("Forest Park Southeast", ("forest park southeast", "the grove"), 38.6317, -90.2439, "neighborhood"),
    _entry("Tower Grove East", ("tower grove east", "tge"), 38.6000, -90.2500, "neighborhood"),
    _entry("Tower Grove South", ("tower grove south", "tgs"), 38.6047, -90.2553, "neighborhood"),
    _entry("Compton Heights", ("compton heights",), 38.6200, -90.2300, "neighborhood"),
    _entry("Mount Pleasant", ("mount pleasant",), 38.5600, -90.2400, "neighborhood"),
    _entry("Carondelet", ("carondelet",), 38.5558, -90.2550, "neighborhood"),
    _entry("Patch", ("the patch",), 38.5500, -90.2600, "neighborhood"),
    _entry("Holly Hills", ("holly hills",), 38.5558, -90.2667, "neighborhood"),
    _entry("Boulevard Heights", ("boulevard heights",), 38.5400, -90.2700, "neighborhood"),
    _entry("Princeton Heights", ("princeton heights",), 38.5700, -90.2800, "neighborhood"),
    _entry("Southampton", ("southampton",), 38.5800, -90.2900, "neighborhood"),
    _entry("St. Louis Hills", ("st. louis hills", "st louis hills"), 38.5900, -90.3000, "neighborhood"),
    _entry("Wydown Skinker", ("wydown skinker",), 38.6500, -90.3000, "neighborhood"),
    _entry("DeBaliviere Place", ("debaliviere place", "debaliviere"), 38.6500, -90.2900, "neighborhood"),
    _entry("West End", ("west end",), 38.6400, -90.2700, "neighborhood"),
    _entry("Visitation Park", ("visitation park",), 38.6500, -90.2700, "neighborhood"),
    _entry("Academy", ("academy",), 38.7200, -90.2600, "neighborhood"),
    _entry("Fountain Park", ("fountain park",), 38.7100, -90.2500, "neighborhood"),
    _entry("Kingsway East", ("kingsway east",), 38.7000, -90.2400, "neighborhood"),
    _entry("Kingsway West", ("kingsway west",), 38.7000, -90.2300, "neighborhood"),
    _entry("Mark Twain", ("mark twain",), 38.7400, -90.2800, "neighborhood"),
    _entry("Mark Twain I-70 Industrial", ("mark twain industrial",), 38.7500, -90.2900, "neighborhood"),
    _entry("Kings Oak", ("kings oak",), 38.7300, -90.2700, "neighborhood"),
    _entry("Near North Riverfront", ("near north riverfront", "riverfront"), 38.7600, -90.1900, "neighborhood"),

    # St. Louis County Municipalities
    _entry("Clayton", ("clayton",), 38.6426, -90.3239, "city"),
    _entry("University City", ("university city", "u city"), 38.6600, -90.3100, "city"),
    _entry("Kirkwood", ("kirkwood",), 38.5833, -90.4086, "city"),
    _entry("Webster Groves", ("webster groves", "webster"), 38.5925, -90.3572, "city"),
    _entry("Maplewood", ("maplewood",), 38.6128, -90.3231, "city"),
    _entry("Richmond Heights", ("richmond heights",), 38.6286, -90.3219, "city"),
    _entry("Brentwood", ("brentwood",), 38.6175, -90.3489, "city"),
    _entry("Ferguson", ("ferguson",), 38.7442, -90.3053, "city"),
    _entry("Florissant", ("florissant",), 38.7892, -90.3225, "city"),
    _entry("Hazelwood", ("hazelwood",), 38.7714, -90.3708, "city"),
    _entry("Overland", ("overland",), 38.7003, -90.3625, "city"),
    _entry("Creve Coeur", ("creve coeur",), 38.6606, -90.4228, "city"),
    _entry("Maryland Heights", ("maryland heights",), 38.7131, -90.4297, "city"),
    _entry("Chesterfield", ("chesterfield",), 38.6631, -90.5772, "city"),
    _entry("Ballwin", ("ballwin",), 38.5950, -90.5461, "city"),
    _entry("Manchester", ("manchester",), 38.5970, -90.5092, "city"),
    _entry("Des Peres", ("des peres",), 38.6009, -90.4328, "city"),
    _entry("Affton", ("affton",), 38.5506, -90.3331, "city"),
    _entry("Lemay", ("lemay",), 38.5333, -90.2833, "city"),
    _entry("Mehlville", ("mehlville",), 38.5086, -90.3192, "city"),
    _entry("Oakville", ("oakville",), 38.4711, -90.3056, "city"),
    _entry("Fenton", ("fenton",), 38.5128, -90.4358, "city"),
    _entry("Valley Park", ("valley park",), 38.5492, -90.4925, "city"),
    _entry("Sunset Hills", ("sunset hills",), 38.5389, -90.4075, "city"),
    _entry("Crestwood", ("crestwood",), 38.5567, -90.3817, "city"),
    _entry("Shrewsbury", ("shrewsbury",), 38.5903, -90.3331, "city"),
    _entry("Ladue", ("ladue",), 38.6400, -90.3825, "city"),
    _entry("Frontenac", ("frontenac",), 38.6350, -90.4147, "city"),
    _entry("Town and Country", ("town and country", "town & country"), 38.6125, -90.4633, "city"),
    _entry("Wildwood", ("wildwood",), 38.5828, -90.6628, "city"),
    _entry("Eureka", ("eureka",), 38.5028, -90.6278, "city"),
    _entry("Pacific", ("pacific",), 38.4811, -90.7417, "city"),
    _entry("Arnold", ("arnold",), 38.4328, -90.3775, "city"),
    _entry("Jennings", ("jennings",), 38.7192, -90.2603, "city"),
    _entry("Normandy", ("normandy",), 38.7206, -90.2972, "city"),
    _entry("Pagedale", ("pagedale",), 38.6831, -90.3075, "city"),
    _entry("Wellston", ("wellston",), 38.6725, -90.2992, "city"),
    _entry("Bel-Ridge", ("bel-ridge", "bel ridge"), 38.7092, -90.3253, "city"),
    _entry("Bellefontaine Neighbors", ("bellefontaine neighbors",), 38.7403, -90.2264, "city"),
    _entry("Berkeley", ("berkeley",), 38.7547, -90.3311, "city"),
    _entry("Black Jack", ("black jack",), 38.7931, -90.2672, "city"),
    _entry("Bridgeton", ("bridgeton",), 38.7506, -90.4114, "city"),
    _entry("Calverton Park", ("calverton park",), 38.7103, -90.3153, "city"),
    _entry("Charlack", ("charlack",), 38.6781, -90.3431, "city"),
    _entry("Cool Valley", ("cool valley",), 38.7281, -90.3092, "city"),
    _entry("Country Club Hills", ("country club hills",), 38.7203, -90.2753, "city"),
    _entry("Edmundson", ("edmundson",), 38.7361, -90.3453, "city"),
    _entry("Ellisville", ("ellisville",), 38.5925, -90.5872, "city"),
    _entry("Glendale", ("glendale",), 38.5953, -90.3831, "city"),
    _entry("Hanley Hills", ("hanley hills",), 38.6875, -90.3231, "city"),
    _entry("Hillsdale", ("hillsdale",), 38.6831, -90.2853, "city"),
    _entry("Kinloch", ("kinloch",), 38.7403, -90.3253, "city"),
    _entry("Lakeshire", ("lakeshire",), 38.5381, -90.3403, "city"),
    _entry("Mackenzie", ("mackenzie",), 38.5753, -90.3203, "city"),
    _entry("Moline Acres", ("moline acres",), 38.7472, -90.2403, "city"),
    _entry("Northwoods", ("northwoods",), 38.7042, -90.2803, "city"),
    _entry("Olivette", ("olivette",), 38.6653, -90.3753, "city"),
    _entry("Pine Lawn", ("pine lawn",), 38.6953, -90.2753, "city"),
    _entry("Riverview", ("riverview",), 38.7553, -90.2103, "city"),
    _entry("Rock Hill", ("rock hill",), 38.6081, -90.3781, "city"),
    _entry("St. Ann", ("st. ann", "st ann"), 38.7272, -90.3831, "city"),
    _entry("St. John", ("st. john", "st john"), 38.7131, -90.3431, "city"),
    _entry("Sycamore Hills", ("sycamore hills",), 38.7003, -90.3453, "city"),
    _entry("Velda City", ("velda city",), 38.6931, -90.2931, "city"),
    _entry("Velda Village Hills", ("velda village hills",), 38.6903, -90.2953, "city"),
    _entry("Vinita Park", ("vinita park",), 38.6903, -90.3253, "city"),
    _entry("Warson Woods", ("warson woods",), 38.6081, -90.3831, "city"),
    _entry("Winchester", ("winchester",), 38.5903, -90.5281, "city"),
    _entry("Woodson Terrace", ("woodson terrace",), 38.7281, -90.3581, "city"),

    # St. Charles County
    _entry("St. Charles County", ("st. charles county", "st charles county", "st. charles co"), 38.8000, -90.6000, "city"),
    _entry("St. Charles", ("st. charles", "st charles"), 38.7831, -90.4811, "city"),
    _entry("O'Fallon", ("o'fallon", "ofallon", "o fallon"), 38.8106, -90.6997, "city"),
    _entry("St. Peters", ("st. peters", "st peters"), 38.8003, -90.6264, "city"),
    _entry("Wentzville", ("wentzville",), 38.8114, -90.8525, "city"),
    _entry("Lake Saint Louis", ("lake saint louis", "lake st. louis", "lake st louis"), 38.7875, -90.7856, "city"),
    _entry("Cottleville", ("cottleville",), 38.7469, -90.6542, "city"),
    _entry("Dardenne Prairie", ("dardenne prairie",), 38.7500, -90.7281, "city"),
    _entry("Weldon Spring", ("weldon spring",), 38.7131, -90.6381, "city"),
    _entry("Portage des Sioux", ("portage des sioux",), 38.9258, -90.3453, "city"),

    # Franklin County
    _entry("Franklin County", ("franklin county", "franklin co"), 38.4000, -91.0000, "city"),
    _entry("Washington", ("washington mo", "washington missouri"), 38.5581, -91.0125, "city"),
    _entry("Union", ("union mo", "union missouri"), 38.4458, -91.0081, "city"),
    _entry("Pacific", ("pacific mo", "pacific missouri"), 38.4811, -90.7417, "city"),

    # Lincoln County
    _entry("Lincoln County", ("lincoln county", "lincoln co"), 39.0500, -90.9500, "city"),
    _entry("Troy", ("troy mo", "troy missouri"), 38.9797, -90.9806, "city"),
    _entry("Winfield", ("winfield mo", "winfield missouri"), 39.0000, -90.7331, "city"),

    # Warren County
    _entry("Warren County", ("warren county", "warren co"), 38.7500, -91.1500, "city"),
    _entry("Warrenton", ("warrenton mo", "warrenton missouri"), 38.8111, -91.1414, "city"),

    # Madison County (IL)
    _entry("Madison County", ("madison county il", "madison county illinois"), 38.8000, -89.9000, "city"),
    _entry("Edwardsville", ("edwardsville",), 38.8114, -89.9531, "city"),
    _entry("Glen Carbon", ("glen carbon",), 38.7481, -89.9831, "city"),
    _entry("Maryville", ("maryville il", "maryville illinois"), 38.7231, -89.9553, "city"),
    _entry("Troy", ("troy il", "troy illinois"), 38.7289, -89.8831, "city"),
    _entry("Highland", ("highland il", "highland illinois"), 38.7392, -89.6714, "city"),

    # St. Clair County (IL)
    _entry("St. Clair County", ("st. clair county", "st clair county il"), 38.6000, -89.9000, "city"),
    _entry("Belleville", ("belleville il", "belleville illinois"), 38.5200, -89.9831, "city"),
    _entry("Collinsville", ("collinsville il", "collinsville illinois"), 38.6703, -89.9842, "city"),
    _entry("O'Fallon", ("o'fallon il", "ofallon il", "o fallon illinois"), 38.5925, -89.9111, "city"),
    _entry("Fairview Heights", ("fairview heights il", "fairview heights illinois"), 38.5889, -89.9903, "city"),
    _entry("Shiloh", ("shiloh il", "shiloh illinois"), 38.5614, -89.8972, "city"),
    _entry("Swansea", ("swansea il", "swansea illinois"), 38.5331, -89.9881, "city"),
    _entry("Cahokia", ("cahokia il", "cahokia illinois"), 38.5703, -90.1903, "city"),
    _entry("Cahokia Heights", ("cahokia heights il", "cahokia heights illinois"), 38.5703, -90.1903, "city"),
    _entry("Caseyville", ("caseyville il", "caseyville illinois"), 38.6367, -90.0264, "city"),
    _entry("Granite City", ("granite city il", "granite city illinois"), 38.7014, -90.1481, "city"),
    _entry("Venice", ("venice il", "venice illinois"), 38.6714, -90.1692, "city"),
    _entry("Madison", ("madison il", "madison illinois"), 38.6825, -90.1564, "city"),
    _entry("Alton", ("alton il", "alton illinois"), 38.8903, -90.1842, "city"),

    # Jefferson County (South of Meramec River)
    _entry("Jefferson County", ("jefferson county", "jeff co", "jeffco"), 38.3000, -90.5000, "city"),
    _entry("Crystal City", ("crystal city",), 38.2208, -90.3792, "city"),
    _entry("Festus", ("festus",), 38.2206, -90.3958, "city"),
    _entry("Herculaneum", ("herculaneum",), 38.2681, -90.3803, "city"),
    _entry("De Soto", ("de soto", "desoto"), 38.1389, -90.5556, "city"),
    _entry("Hillsboro", ("hillsboro",), 38.2311, -90.5619, "city"),
    _entry("Pevely", ("pevely",), 38.2831, -90.3958, "city"),
    _entry("Barnhart", ("barnhart",), 38.3431, -90.4042, "city"),
    _entry("Imperial", ("imperial",), 38.3689, -90.3753, "city"),
    _entry("High Ridge", ("high ridge",), 38.4642, -90.5275, "city"),
    _entry("House Springs", ("house springs",), 38.4081, -90.5681, "city"),
    _entry("Cedar Hill", ("cedar hill",), 38.3531, -90.6417, "city"),
    _entry("Byrnes Mill", ("byrnes mill",), 38.4378, -90.5708, "city"),
    _entry("Meramec River", ("meramec river", "meramec"), 38.4500, -90.4000, "landmark"),

    # Illinois Side (East St. Louis Area Only)
    _entry("East St. Louis", ("east st. louis", "east stl", "e. st. louis"), 38.6245, -90.1507, "city"),
    _entry("Washington Park", ("washington park",), 38.6350, -90.0933, "city"),
    _entry("Fairmont City", ("fairmont city",), 38.6553, -90.0992, "city"),

    # Major Landmarks
    _entry("Gateway Arch", ("gateway arch", "the arch", "arch grounds", "jefferson national expansion memorial"), 38.6247, -90.1848, "landmark"),
    _entry("Busch Stadium", ("busch stadium", "cardinals stadium"), 38.6226, -90.1931, "landmark"),
    _entry("Enterprise Center", ("enterprise center", "scottrade center", "kiel center", "blues arena"), 38.6269, -90.2028, "landmark"),
    _entry("Union Station", ("union station", "st. louis union station"), 38.6317, -90.2069, "landmark"),
    _entry("City Hall", ("city hall", "st. louis city hall"), 38.6272, -90.1958, "landmark"),
    _entry("Scottrade Center", ("scottrade",), 38.6269, -90.2028, "landmark"),
    _entry("The Dome", ("the dome at america's center", "edward jones dome", "dome"), 38.6328, -90.1886, "landmark"),
    _entry("America's Center", ("america's center", "convention center"), 38.6333, -90.1900, "landmark"),
    _entry("St. Louis Zoo", ("st. louis zoo", "the zoo"), 38.6350, -90.2900, "landmark"),
    _entry("Art Museum", ("saint louis art museum", "art museum", "slam"), 38.6394, -90.2942, "landmark"),
    _entry("Science Center", ("science center", "st. louis science center"), 38.6308, -90.2708, "landmark"),
    _entry("History Museum", ("history museum", "missouri history museum"), 38.6453, -90.2858, "landmark"),
    _entry("Botanical Garden", ("botanical garden", "missouri botanical garden", "shaw's garden"), 38.6128, -90.2594, "landmark"),
    _entry("Barnes-Jewish Hospital", ("barnes", "barnes-jewish", "barnes jewish hospital", "bjh"), 38.6372, -90.2633, "landmark"),
    _entry("SLU", ("saint louis university", "slu", "st. louis university"), 38.6367, -90.2342, "landmark"),
    _entry("Washington University", ("washington university", "washu", "wash u"), 38.6488, -90.3108, "landmark"),
    _entry("UMSL", ("umsl", "university of missouri st. louis"), 38.7108, -90.3114, "landmark"),
    _entry("Lambert Airport", ("lambert", "stl airport", "lambert airport", "st. louis airport", "lambert international"), 38.7487, -90.3700, "landmark"),
    _entry("Ballpark Village", ("ballpark village",), 38.6233, -90.1914, "landmark"),
    _entry("City Museum", ("city museum",), 38.6333, -90.2003, "landmark"),
    _entry("Soldiers Memorial", ("soldiers memorial",), 38.6319, -90.1967, "landmark"),
    _entry("Kiener Plaza", ("kiener plaza",), 38.6261, -90.1900, "landmark"),
    _entry("Citygarden", ("citygarden", "city garden"), 38.6258, -90.1892, "landmark"),
    _entry("Tower Grove Park", ("tower grove park",), 38.6056, -90.2533, "landmark"),
    _entry("Carondelet Park", ("carondelet park",), 38.5611, -90.2661, "landmark"),
    _entry("Francis Park", ("francis park",), 38.6022, -90.2922, "landmark"),
    _entry("The Muny", ("the muny", "muny", "municipal opera"), 38.6367, -90.2833, "landmark"),
    _entry("The Fabulous Fox", ("fabulous fox", "fox theatre", "the fox"), 38.6400, -90.2322, "landmark"),
    _entry("Powell Symphony Hall", ("powell hall", "powell symphony hall"), 38.6386, -90.2378, "landmark"),
    _entry("Peabody Opera House", ("peabody opera house", "peabody"), 38.6356, -90.2072, "landmark"),
    _entry("Chaifetz Arena", ("chaifetz arena", "chaifetz"), 38.6328, -90.2317, "landmark"),
    _entry("St. Louis Cathedral", ("cathedral basilica", "st. louis cathedral", "cathedral"), 38.6400, -90.2600, "landmark"),
    _entry("Old Courthouse", ("old courthouse", "st. louis old courthouse"), 38.6250, -90.1892, "landmark"),
    _entry("Laclede's Landing", ("laclede's landing", "lacledes landing"), 38.6300, -90.1850, "landmark"),
    _entry("Soulard Market", ("soulard market", "soulard farmers market"), 38.6086, -90.2108, "landmark"),
    _entry("Anheuser-Busch Brewery", ("anheuser-busch", "budweiser brewery", "ab brewery"), 38.5981, -90.2092, "landmark"),
    _entry("Grant's Farm", ("grants farm", "grant's farm"), 38.5500, -90.3500, "landmark"),
    _entry("Six Flags St. Louis", ("six flags", "six flags st. louis", "six flags stl"), 38.5131, -90.6758, "landmark"),
    _entry("Missouri Botanical Garden", ("missouri botanical garden", "botanical garden", "mo bot", "shaw's garden"), 38.6128, -90.2594, "landmark"),
    _entry("Laumeier Sculpture Park", ("laumeier", "laumeier sculpture park"), 38.5500, -90.4000, "landmark"),
    _entry("Cahokia Mounds", ("cahokia mounds", "monks mound"), 38.6564, -90.0625, "landmark"),
    _entry("Lewis and Clark State Historic Site", ("lewis and clark", "lewis & clark"), 38.8000, -90.1000, "landmark"),
    _entry("Jefferson Barracks", ("jefferson barracks", "jefferson barracks park"), 38.4700, -90.2200, "landmark"),
    _entry("Fort Belle Fontaine", ("fort belle fontaine", "belle fontaine"), 38.8000, -90.2000, "landmark"),
    _entry("Ulysses S. Grant National Historic Site", ("grant's farm", "white haven"), 38.5500, -90.3500, "landmark"),
    _entry("Eugene Field House", ("eugene field house",), 38.6300, -90.2000, "landmark"),
    _entry("Campbell House Museum", ("campbell house", "campbell house museum"), 38.6400, -90.2000, "landmark"),
    _entry("Chatillon-DeMenil Mansion", ("chatillon-demenil", "demenil mansion"), 38.6000, -90.2200, "landmark"),
    _entry("St. Louis Art Museum", ("saint louis art museum", "art museum", "slam", "forest park art museum"), 38.6394, -90.2942, "landmark"),
    _entry("Missouri History Museum", ("missouri history museum", "history museum", "forest park history museum"), 38.6453, -90.2858, "landmark"),
    _entry("St. Louis Science Center", ("st. louis science center", "science center", "forest park science center"), 38.6308, -90.2708, "landmark"),
    _entry("St. Louis Zoo", ("st. louis zoo", "the zoo", "forest park zoo"), 38.6350, -90.2900, "landmark"),
    _entry("Forest Park", ("forest park",), 38.6377, -90.2854, "landmark"),
    _entry("Tower Grove Park", ("tower grove park",), 38.6056, -90.2533, "landmark"),
    _entry("Carondelet Park", ("carondelet park",), 38.5611, -90.2661, "landmark"),
    _entry("Francis Park", ("francis park",), 38.6022, -90.2922, "landmark"),
    _entry("Willmore Park", ("willmore park",), 38.5500, -90.3000, "landmark"),
    _entry("O'Fallon Park", ("o'fallon park", "ofallon park"), 38.6800, -90.2200, "landmark"),
    _entry("Fairground Park", ("fairground park", "fairgrounds park"), 38.6650, -90.2133, "landmark"),
    _entry("Lafayette Park", ("lafayette park",), 38.6153, -90.2233, "landmark"),
    _entry("Benton Park", ("benton park",), 38.5997, -90.2222, "landmark"),
    _entry("Soulard Park", ("soulard park",), 38.6086, -90.2108, "landmark"),
    _entry("Cherokee Park", ("cherokee park",), 38.5972, -90.2397, "landmark"),
    _entry("Compton Hill Reservoir Park", ("compton hill", "compton hill reservoir"), 38.6200, -90.2300, "landmark"),
    _entry("Ruth Park", ("ruth park",), 38.6000, -90.2500, "landmark"),
    _entry("Wilmore Park", ("wilmore park",), 38.5500, -90.3000, "landmark"),
    _entry("St. Louis University Hospital", ("slu hospital", "st. louis university hospital"), 38.6367, -90.2342, "landmark"),
    _entry("SSM Health St. Louis University Hospital", ("ssm slu hospital", "ssm health slu"), 38.6367, -90.2342, "landmark"),
    _entry("Mercy Hospital St. Louis", ("mercy hospital", "mercy st. louis"), 38.6400, -90.2500, "landmark"),
    _entry("St. Louis Children's Hospital", ("children's hospital", "st. louis children's"), 38.6372, -90.2633, "landmark"),
    _entry("St. Mary's Hospital", ("st. mary's hospital", "st mary's"), 38.6000, -90.2500, "landmark"),
    _entry("Missouri Baptist Medical Center", ("missouri baptist", "mo baptist hospital"), 38.6400, -90.4000, "landmark"),
    _entry("St. Luke's Hospital", ("st. luke's hospital", "st lukes"), 38.6000, -90.4000, "landmark"),
    _entry("St. Anthony's Medical Center", ("st. anthony's", "st anthonys"), 38.5500, -90.3500, "landmark"),
    _entry("Memorial Hospital", ("memorial hospital belleville",), 38.5200, -89.9831, "landmark"),
    _entry("St. Elizabeth's Hospital", ("st. elizabeth's", "st elizabeths"), 38.6000, -89.9500, "landmark"),
    _entry("St. Louis Galleria", ("galleria", "st. louis galleria", "the galleria"), 38.6400, -90.3400, "landmark"),
    _entry("West County Center", ("west county center", "west county mall"), 38.6000, -90.4000, "landmark"),
    _entry("South County Center", ("south county center", "south county mall"), 38.5500, -90.3500, "landmark"),
    _entry("Mid Rivers Mall", ("mid rivers", "mid rivers mall"), 38.8000, -90.6000, "landmark"),
    _entry("St. Louis Mills", ("st. louis mills", "st louis mills", "mills mall"), 38.7500, -90.4000, "landmark"),
    _entry("St. Charles Convention Center", ("st. charles convention center",), 38.7831, -90.4811, "landmark"),
    _entry("Family Arena", ("family arena", "st. charles family arena"), 38.8000, -90.6000, "landmark"),
    _entry("Ameristar Casino", ("ameristar", "ameristar casino st. charles"), 38.7831, -90.4811, "landmark"),
    _entry("Harrah's Casino", ("harrah's", "harrahs casino"), 38.7500, -90.2000, "landmark"),
    _entry("River City Casino", ("river city", "river city casino"), 38.5500, -90.3000, "landmark"),
    _entry("Hollywood Casino", ("hollywood casino", "hollywood casino st. louis"), 38.6000, -90.2000, "landmark"),
    _entry("Lumiere Place", ("lumiere", "lumiere place", "lumiere casino"), 38.6300, -90.1850, "landmark"),
    _entry("St. Louis Aquarium", ("st. louis aquarium", "aquarium"), 38.6317, -90.2069, "landmark"),
    _entry("St. Louis Wheel", ("st. louis wheel", "ferris wheel"), 38.6317, -90.2069, "landmark"),
    _entry("St. Louis Carousel", ("st. louis carousel",), 38.6317, -90.2069, "landmark"),
    _entry("St. Louis Union Station", ("union station", "st. louis union station"), 38.6317, -90.2069, "landmark"),
    _entry("Mississippi River", ("mississippi river", "the mississippi"), 38.6300, -90.1800, "landmark"),
    _entry("Missouri River", ("missouri river",), 38.8000, -90.5000, "landmark"),
    _entry("Meramec River", ("meramec river", "meramec"), 38.4500, -90.4000, "landmark"),
    _entry("Cuivre River", ("cuivre river",), 39.0000, -90.9000, "landmark"),
    _entry("Big River", ("big river",), 38.2000, -90.6000, "landmark"),

    # Major Highways & Interstates
    _entry("I-70", ("i-70", "interstate 70", "i70"), 38.6550, -90.2350, "road"),
    _entry("I-64", ("i-64", "interstate 64", "i64", "us-40", "highway 40", "us 40"), 38.6300, -90.2500, "road"),
    _entry("I-44", ("i-44", "interstate 44", "i44"), 38.5900, -90.3000, "road"),
    _entry("I-55", ("i-55", "interstate 55", "i55"), 38.6000, -90.2000, "road"),
    _entry("I-270", ("i-270", "interstate 270", "i270"), 38.7000, -90.4000, "road"),
    _entry("I-170", ("i-170", "interstate 170", "i170"), 38.6700, -90.3100, "road"),
    _entry("I-255", ("i-255", "interstate 255", "i255"), 38.5000, -90.1500, "road"),
    _entry("I-70 Business", ("i-70 business", "i70 business"), 38.7831, -90.4811, "road"),
    _entry("US 67", ("us-67", "us 67", "highway 67"), 38.7500, -90.3000, "road"),
    _entry("MO 141", ("mo-141", "mo 141", "highway 141"), 38.6000, -90.5000, "road"),
    _entry("MO 94", ("mo-94", "mo 94", "highway 94"), 38.6000, -90.2000, "road"),
    _entry("MO 30", ("mo-30", "mo 30", "highway 30"), 38.5000, -90.4000, "road"),
    _entry("MO 100", ("mo-100", "mo 100", "highway 100"), 38.6000, -90.4000, "road"),
    _entry("MO 21", ("mo-21", "mo 21", "highway 21"), 38.5000, -90.3000, "road"),
    _entry("MO 340", ("mo-340", "mo 340", "highway 340"), 38.6500, -90.4000, "road"),
    _entry("MO 367", ("mo-367", "mo 367", "highway 367"), 38.7500, -90.2000, "road"),
    _entry("IL 3", ("il-3", "il 3", "highway 3", "route 3"), 38.6000, -90.1000, "road"),
    _entry("IL 157", ("il-157", "il 157", "highway 157"), 38.6000, -89.9500, "road"),
    _entry("IL 159", ("il-159", "il 159", "highway 159"), 38.6000, -89.9000, "road"),
    _entry("IL 111", ("il-111", "il 111", "highway 111"), 38.6000, -90.0500, "road"),

    # Major Streets
    _entry("Grand Boulevard", ("grand", "grand blvd", "grand avenue", "south grand", "north grand"), 38.6150, -90.2422, "road"),
    _entry("Kingshighway", ("kingshighway", "kingshighway blvd", "kings highway"), 38.6200, -90.2617, "road"),
    _entry("Natural Bridge", ("natural bridge", "natural bridge road"), 38.6900, -90.2500, "road"),
    _entry("Page Avenue", ("page", "page avenue", "page ave", "page blvd"), 38.6950, -90.3500, "road"),
    _entry("Olive Street", ("olive", "olive street", "olive blvd", "olive boulevard"), 38.6450, -90.3000, "road"),
    _entry("Lindell Boulevard", ("lindell", "lindell blvd", "lindell boulevard"), 38.6400, -90.2700, "road"),
    _entry("Market Street", ("market street", "market"), 38.6275, -90.2050, "road"),
    _entry("Washington Avenue", ("washington ave", "washington avenue", "washington"), 38.6315, -90.2000, "road"),
    _entry("Delmar Boulevard", ("delmar", "delmar blvd", "delmar loop", "delmar boulevard"), 38.6550, -90.3000, "road"),
    _entry("Clayton Road", ("clayton road", "clayton rd", "clayton"), 38.6350, -90.3500, "road"),
    _entry("Manchester Road", ("manchester road", "manchester rd", "manchester"), 38.6000, -90.4000, "road"),
    _entry("Gravois Road", ("gravois", "gravois road", "gravois ave", "gravois avenue"), 38.5600, -90.2800, "road"),
    _entry("Chippewa Street", ("chippewa", "chippewa street"), 38.5850, -90.2600, "road"),
    _entry("Arsenal Street", ("arsenal", "arsenal street"), 38.6100, -90.2400, "road"),
    _entry("Broadway", ("broadway", "north broadway", "south broadway"), 38.6350, -90.1900, "road"),
    _entry("Jefferson Avenue", ("jefferson", "jefferson ave", "jefferson avenue"), 38.6200, -90.2180, "road"),
    _entry("Tucker Boulevard", ("tucker", "tucker blvd", "12th street"), 38.6280, -90.1970, "road"),
    _entry("Hampton Avenue", ("hampton", "hampton ave", "hampton avenue"), 38.6050, -90.2800, "road"),
    _entry("Lindbergh Boulevard", ("lindbergh", "lindbergh blvd", "lindbergh boulevard"), 38.6000, -90.3600, "road"),
    _entry("Big Bend", ("big bend", "big bend blvd", "big bend boulevard"), 38.6200, -90.3400, "road"),
    _entry("Tesson Ferry Road", ("tesson ferry", "tesson ferry road", "tesson ferry rd"), 38.5500, -90.3500, "road"),
    _entry("Watson Road", ("watson", "watson road", "watson rd"), 38.5800, -90.3800, "road"),
    _entry("Laclede Station Road", ("laclede station", "laclede station road"), 38.5700, -90.3200, "road"),
    _entry("Lemay Ferry Road", ("lemay ferry", "lemay ferry road", "lemay ferry rd"), 38.5300, -90.2800, "road"),
    _entry("River Des Peres", ("river des peres", "des peres river"), 38.5800, -90.2500, "road"),
    _entry("Riverview Drive", ("riverview drive", "riverview"), 38.7500, -90.2000, "road"),
    _entry("Hall Street", ("hall", "hall street"), 38.6500, -90.2000, "road"),
    _entry("14th Street", ("14th", "14th street"), 38.6300, -90.1950, "road"),
    _entry("18th Street", ("18th", "18th street"), 38.6250, -90.1900, "road"),
    _entry("Vandeventer Avenue", ("vandeventer", "vandeventer ave", "vandeventer avenue"), 38.6400, -90.2500, "road"),
    _entry("Compton Avenue", ("compton", "compton ave", "compton avenue"), 38.6200, -90.2300, "road"),
    _entry("Soulard Street", ("soulard street",), 38.6100, -90.2100, "road"),
    _entry("Russell Boulevard", ("russell", "russell blvd", "russell boulevard"), 38.6000, -90.2200, "road"),
    _entry("Sidney Street", ("sidney", "sidney street"), 38.5900, -90.2400, "road"),
    _entry("Lafayette Avenue", ("lafayette", "lafayette ave", "lafayette avenue"), 38.6150, -90.2250, "road"),
    _entry("Park Avenue", ("park", "park ave", "park avenue"), 38.6400, -90.2600, "road"),
    _entry("Union Boulevard", ("union", "union blvd", "union boulevard"), 38.6500, -90.2700, "road"),
    _entry("Skinker Boulevard", ("skinker", "skinker blvd", "skinker boulevard"), 38.6500, -90.2900, "road"),
    _entry("McPherson Avenue", ("mcpherson", "mcpherson ave", "mcpherson avenue"), 38.6450, -90.2800, "road"),
    _entry("Waterman Boulevard", ("waterman", "waterman blvd", "waterman boulevard"), 38.6400, -90.2900, "road"),
    _entry("Forest Park Parkway", ("forest park parkway", "forest park pkwy"), 38.6400, -90.2800, "road"),
    _entry("McKnight Road", ("mcknight", "mcknight road", "mcknight rd"), 38.6800, -90.3200, "road"),
    _entry("Dorsett Road", ("dorsett", "dorsett road", "dorsett rd"), 38.7000, -90.4000, "road"),
    _entry("St. Charles Rock Road", ("st. charles rock road", "st charles rock road", "st. charles rock rd"), 38.7200, -90.3500, "road"),
    _entry("New Halls Ferry Road", ("new halls ferry", "new halls ferry road"), 38.7500, -90.3000, "road"),
    _entry("Old Halls Ferry Road", ("old halls ferry", "old halls ferry road"), 38.7400, -90.2800, "road"),
    _entry("West Florissant Avenue", ("west florissant", "west florissant ave"), 38.7500, -90.3000, "road"),
    _entry("North Florissant Avenue", ("north florissant", "north florissant ave"), 38.7000, -90.2500, "road"),
    _entry("South Florissant Avenue", ("south florissant", "south florissant ave"), 38.6500, -90.3000, "road"),
    _entry("Riverview Boulevard", ("riverview blvd", "riverview boulevard"), 38.7500, -90.2000, "road"),
    _entry("Lewis and Clark Boulevard", ("lewis and clark", "lewis & clark blvd"), 38.8000, -90.5000, "road"),
    _entry("First Capitol Drive", ("first capitol", "first capitol drive"), 38.7800, -90.4800, "road"),
    _entry("Zumbehl Road", ("zumbehl", "zumbehl road"), 38.8000, -90.6000, "road"),
    _entry("Highway K", ("highway k", "hwy k", "route k"), 38.8000, -90.7000, "road"),
    _entry("Highway N", ("highway n", "hwy n", "route n"), 38.7500, -90.6500, "road"),
    _entry("Highway DD", ("highway dd", "hwy dd", "route dd"), 38.6000, -90.5000, "road"),
    _entry("Highway 61", ("highway 61", "hwy 61", "route 61"), 38.5000, -90.3000, "road"),
    _entry("Highway 30", ("highway 30", "hwy 30", "route 30"), 38.5000, -90.4000, "road"),

    # Bridges
    _entry("Poplar Street Bridge", ("poplar street bridge", "poplar st bridge", "poplar bridge"), 38.6200, -90.1700, "bridge"),
    _entry("MLK Bridge", ("mlk bridge", "martin luther king bridge", "martin luther king jr bridge"), 38.6350, -90.1750, "bridge"),
    _entry("Eads Bridge", ("eads bridge",), 38.6280, -90.1790, "bridge"),
    _entry("Stan Musial Bridge", ("stan musial bridge", "new mississippi river bridge", "stan span", "stan the man bridge"), 38.6420, -90.1700, "bridge"),
    _entry("Jefferson Barracks Bridge", ("jefferson barracks bridge", "jb bridge", "jefferson barracks"), 38.4700, -90.2200, "bridge"),
    _entry("Chain of Rocks Bridge", ("chain of rocks bridge", "chain of rocks"), 38.7550, -90.1700, "bridge"),
    _entry("McKinley Bridge", ("mckinley bridge",), 38.6500, -90.1800, "bridge"),
    _entry("Meramec River Bridge", ("meramec bridge", "meramec river bridge"), 38.4500, -90.4000, "bridge"),
    _entry("I-270 Bridge", ("i-270 bridge", "270 bridge"), 38.7000, -90.4000, "bridge"),
    _entry("I-55 Bridge", ("i-55 bridge", "55 bridge"), 38.6000, -90.1700, "bridge"),
    _entry("I-64 Bridge", ("i-64 bridge", "64 bridge", "highway 40 bridge"), 38.6300, -90.1700, "bridge"),
    _entry("I-70 Bridge", ("i-70 bridge", "70 bridge"), 38.6550, -90.1700, "bridge"),
    _entry("Daniel Boone Bridge", ("daniel boone bridge",), 38.8000, -90.5000, "bridge"),
    _entry("Blanchette Bridge", ("blanchette bridge",), 38.7831, -90.4811, "bridge"),
    _entry("Discovery Bridge", ("discovery bridge",), 38.8100, -90.5000, "bridge"),

    # Intersections / Interchanges
    _entry("I-64 at Grand", ("i-64 and grand", "highway 40 at grand", "64 and grand"), 38.6300, -90.2420, "intersection"),
    _entry("I-70 at I-270", ("i-70 and i-270", "70/270 interchange", "70 and 270"), 38.7600, -90.3800, "intersection"),
    _entry("I-44 at I-270", ("i-44 and i-270", "44/270 interchange", "44 and 270"), 38.5400, -90.4200, "intersection"),
    _entry("I-64 at I-170", ("i-64 and i-170", "64/170 interchange", "64 and 170"), 38.6350, -90.3100, "intersection"),
    _entry("I-70 at I-170", ("i-70 and i-170", "70/170 interchange", "70 and 170"), 38.7050, -90.3100, "intersection"),
    _entry("I-55 at I-270", ("i-55 and i-270", "55/270 interchange", "55 and 270"), 38.5000, -90.3000, "intersection"),
    _entry("I-44 at I-55", ("i-44 and i-55", "44/55 interchange", "44 and 55"), 38.5900, -90.2500, "intersection"),
    _entry("I-64 at I-55", ("i-64 and i-55", "64/55 interchange", "64 and 55", "highway 40 and 55"), 38.6200, -90.2000, "intersection"),
    _entry("I-70 at I-55", ("i-70 and i-55", "70/55 interchange", "70 and 55"), 38.6500, -90.2000, "intersection"),
    _entry("I-270 at I-170", ("i-270 and i-170", "270/170 interchange", "270 and 170"), 38.7000, -90.3500, "intersection"),
    _entry("I-270 at Page", ("i-270 and page", "270 and page", "270/page"), 38.7000, -90.3500, "intersection"),
    _entry("I-270 at Natural Bridge", ("i-270 and natural bridge", "270 and natural bridge"), 38.7000, -90.3000, "intersection"),
    _entry("I-270 at St. Charles Rock Road", ("i-270 and st. charles rock", "270 and st charles rock"), 38.7200, -90.3500, "intersection"),
    _entry("I-44 at Lindbergh", ("i-44 and lindbergh", "44 and lindbergh"), 38.6000, -90.3600, "intersection"),
    _entry("I-44 at Hampton", ("i-44 and hampton", "44 and hampton"), 38.5900, -90.2800, "intersection"),
    _entry("I-44 at Kingshighway", ("i-44 and kingshighway", "44 and kingshighway"), 38.5900, -90.2600, "intersection"),
    _entry("I-64 at Kingshighway", ("i-64 and kingshighway", "64 and kingshighway", "highway 40 and kingshighway"), 38.6300, -90.2600, "intersection"),
    _entry("I-64 at Skinker", ("i-64 and skinker", "64 and skinker", "highway 40 and skinker"), 38.6400, -90.2900, "intersection"),
    _entry("I-70 at Natural Bridge", ("i-70 and natural bridge", "70 and natural bridge"), 38.6900, -90.2500, "intersection"),
    _entry("I-70 at Goodfellow", ("i-70 and goodfellow", "70 and goodfellow"), 38.6800, -90.2400, "intersection"),
    _entry("Grand and Gravois", ("grand and gravois",), 38.6000, -90.2400, "intersection"),
    _entry("Grand and Chippewa", ("grand and chippewa",), 38.5900, -90.2400, "intersection"),
    _entry("Kingshighway and Chippewa", ("kingshighway and chippewa",), 38.5900, -90.2600, "intersection"),
    _entry("Kingshighway and Arsenal", ("kingshighway and arsenal",), 38.6100, -90.2600, "intersection"),
    _entry("Kingshighway and Lindell", ("kingshighway and lindell",), 38.6400, -90.2600, "intersection"),
    _entry("Lindbergh and Manchester", ("lindbergh and manchester",), 38.6000, -90.4000, "intersection"),
    _entry("Lindbergh and Clayton", ("lindbergh and clayton",), 38.6400, -90.3800, "intersection"),
    _entry("Big Bend and Manchester", ("big bend and manchester",), 38.6000, -90.4000, "intersection"),
    _entry("Clayton and Big Bend", ("clayton and big bend",), 38.6400, -90.3400, "intersection"),
    _entry("Clayton and Lindbergh", ("clayton and lindbergh",), 38.6400, -90.3800, "intersection"),
    _entry("Delmar and Skinker", ("delmar and skinker", "delmar loop"), 38.6550, -90.3000, "intersection"),
    _entry("Delmar and Kingshighway", ("delmar and kingshighway",), 38.6550, -90.2600, "intersection"),
    _entry("Market and Tucker", ("market and tucker", "market and 12th"), 38.6280, -90.2000, "intersection"),
    _entry("Market and Broadway", ("market and broadway",), 38.6300, -90.1900, "intersection"),
    _entry("Washington and Tucker", ("washington and tucker", "washington and 12th"), 38.6315, -90.2000, "intersection"),
    _entry("Olive and Tucker", ("olive and tucker", "olive and 12th"), 38.6450, -90.2000, "intersection"),
    _entry("Olive and Grand", ("olive and grand",), 38.6450, -90.2400, "intersection"),
    _entry("Page and Lindbergh", ("page and lindbergh",), 38.6950, -90.3600, "intersection"),
    _entry("Page and I-270", ("page and i-270", "page and 270"), 38.7000, -90.3500, "intersection"),
    _entry("Natural Bridge and I-270", ("natural bridge and i-270", "natural bridge and 270"), 38.7000, -90.3000, "intersection"),
    _entry("St. Charles Rock Road and I-270", ("st. charles rock and i-270", "st charles rock and 270"), 38.7200, -90.3500, "intersection"),
    _entry("Highway 40 and I-270", ("highway 40 and i-270", "hwy 40 and 270", "i-64 and i-270"), 38.7000, -90.4000, "intersection"),
)
