"""
Imágenes de paisaje por ubicación.

Mapea keywords de ubicación (en hebreo, como vienen en los deals) a
imágenes de Wikimedia Commons. Se usan como imagen por defecto de
los deals que no tienen imagen propia.

Orden: sub-regiones específicas, luego ciudades, luego regiones
amplias. Se toma la primera keyword contenida en la ubicación.
"""

_WM = "https://upload.wikimedia.org/wikipedia/commons/thumb"

_RAMON = f"{_WM}/a/a1/MakhteshRamonMar262022_01.jpg/1200px-MakhteshRamonMar262022_01.jpg"
_DEAD_SEA = f"{_WM}/6/6f/Dead_Sea_beach_00.JPG/1200px-Dead_Sea_beach_00.JPG"
_GOLAN = f"{_WM}/9/9a/Banias_-_Temple_of_Pan_001.jpg/1200px-Banias_-_Temple_of_Pan_001.jpg"
_KINNERET = f"{_WM}/f/f7/Kinneret_cropped.jpg/1200px-Kinneret_cropped.jpg"
_CAESAREA = f"{_WM}/a/a9/Caesarea.JPG/1200px-Caesarea.JPG"
_NEGEV = f"{_WM}/d/d2/NahalHavarimNov212022_03.jpg/1200px-NahalHavarimNov212022_03.jpg"
_JAFFA = (
    f"{_WM}/a/a3/ISR-2013-Aerial-Jaffa-Port_of_Jaffa.jpg/"
    "1200px-ISR-2013-Aerial-Jaffa-Port_of_Jaffa.jpg"
)
_TEL_AVIV = f"{_WM}/6/69/Sarona_CBD_01_%28cropped%29.jpg/1200px-Sarona_CBD_01_%28cropped%29.jpg"
_JERUSALEM = (
    f"{_WM}/9/94/%D7%94%D7%9E%D7%A6%D7%95%D7%93%D7%94_%D7%91%D7%9C%D7%99%D7%9C%D7%94.jpg/"
    "1200px-%D7%94%D7%9E%D7%A6%D7%95%D7%93%D7%94_%D7%91%D7%9C%D7%99%D7%9C%D7%94.jpg"
)
_EILAT = f"{_WM}/5/5a/Eilat_night_hotels_2016.jpg/1200px-Eilat_night_hotels_2016.jpg"
_HAIFA = (
    f"{_WM}/d/dd/The_Hanging_Gardens_of_Haifa%2C_Israel_%2850099173503%29_%28cropped%29.jpg/"
    "1200px-The_Hanging_Gardens_of_Haifa%2C_Israel_%2850099173503%29_%28cropped%29.jpg"
)
_NAZARETH = (
    f"{_WM}/3/3e/Nazareth_Panorama_Dafna_Tal_IMOT_%2814532097313%29.jpg/"
    "1200px-Nazareth_Panorama_Dafna_Tal_IMOT_%2814532097313%29.jpg"
)

DEFAULT_LOCATION_IMAGE = _RAMON

# El orden importa: lo específico antes que lo general
LOCATION_IMAGES: tuple[tuple[str, str], ...] = (
    # Sub-regiones / lugares puntuales
    ("מצפה רמון", _RAMON),
    ("ים המלח", _DEAD_SEA),
    ("רמת הגולן", _GOLAN),
    ("גליל עליון", _KINNERET),
    ("חוף הכרמל", _CAESAREA),
    ("עין גדי", _DEAD_SEA),
    ("עמק הירדן", _KINNERET),
    ("שפלת יהודה", _NEGEV),
    # Ciudades
    ("יפו", _JAFFA),
    ("תל אביב", _TEL_AVIV),
    ("ירושלים", _JERUSALEM),
    ("אילת", _EILAT),
    ("חיפה", _HAIFA),
    ("טבריה", _KINNERET),
    ("כנרת", _KINNERET),
    ("נצרת", _NAZARETH),
    ("קיסריה", _CAESAREA),
    ("הרצליה", _TEL_AVIV),
    ("נחשולים", _CAESAREA),
    ("ערד", _NEGEV),
    ("צפת", _KINNERET),
    ("ראש פינה", _KINNERET),
    ("בת ים", _TEL_AVIV),
    ("אשקלון", _TEL_AVIV),
    ("אשדוד", _TEL_AVIV),
    ("נתניה", _TEL_AVIV),
    # Regiones amplias
    ("גולן", _GOLAN),
    ("גליל", _KINNERET),
    ("נגב", _NEGEV),
    ("כרמל", _HAIFA),
    ("צפון", _KINNERET),
    ("דרום", _NEGEV),
    ("מרכז", _TEL_AVIV),
)


def location_image(location: str) -> str:
    """Devuelve la imagen de paisaje que mejor matchea la ubicación."""
    for keyword, url in LOCATION_IMAGES:
        if keyword in (location or ""):
            return url
    return DEFAULT_LOCATION_IMAGE
