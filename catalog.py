# catalog.py
from collections import namedtuple
from types import MappingProxyType

Product = namedtuple("Product", ["product_id", "name", "base_price"])

# --- Products ---
PRODUCTS = (
    Product(1001, "Wireless Mouse", 19.99),
    Product(1002, "Bluetooth Headphones", 49.99),
    Product(1003, "Mechanical Keyboard", 89.99),
    Product(1004, "USB-C Cable", 9.99),
    Product(1005, "Webcam", 39.99),
    Product(1006, "Laptop Stand", 25.99),
    Product(1007, "4K Monitor", 229.99),
    Product(1008, "Portable SSD", 79.99),
    Product(1009, "Smartphone Case", 15.99),
    Product(1010, "Wireless Charger", 29.99),
)

# --- Geolocations ---
COUNTRIES = ("USA", "Canada", "UK", "Germany", "France", "Australia", "Japan", "Brazil", "India", "Mexico")

CITIES = MappingProxyType({
    "USA": ("New York", "Los Angeles", "Chicago", "Houston", "Seattle"),
    "Canada": ("Toronto", "Vancouver", "Montreal", "Ottawa"),
    "UK": ("London", "Manchester", "Bristol", "Birmingham"),
    "Germany": ("Berlin", "Munich", "Hamburg", "Frankfurt"),
    "France": ("Paris", "Lyon", "Marseille", "Toulouse"),
    "Australia": ("Sydney", "Melbourne", "Brisbane", "Perth"),
    "Japan": ("Tokyo", "Osaka", "Yokohama", "Nagoya"),
    "Brazil": ("Sao Paulo", "Rio de Janeiro", "Brasilia", "Salvador"),
    "India": ("Mumbai", "Delhi", "Bangalore", "Hyderabad"),
    "Mexico": ("Mexico City", "Guadalajara", "Monterrey", "Puebla"),
})


def cities_for(country):
    """Cities an order shipped to `country` can be placed in."""
    return CITIES[country]
