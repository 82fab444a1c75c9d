"""Sample users, vehicles, ride offers and selections for demos."""

SAMPLE_COMMANDS = [
    ("add-user", "Rohan, M, 36"),
    ("add-vehicle", "Rohan, Swift, KA-01-12345"),
    ("add-user", "Shashank, M, 29"),
    ("add-vehicle", "Shashank, Baleno, TS-05-62395"),
    ("add-user", "Nandini, F, 29"),
    ("add-user", "Shipra, F, 27"),
    ("add-vehicle", "Shipra, Polo, KA-05-41491"),
    ("add-vehicle", "Shipra, Activa, KA-12-12332"),
    ("add-user", "Gaurav, M, 29"),
    ("add-user", "Rahul, M, 35"),
    ("add-vehicle", "Rahul, XUV, KA-05-1234"),
    ("add-vehicle", "Rohan, Polo, KA-01-44252"),
    ("offer-ride", "Rohan, Origin=Hyderabad, Available Seats=1, Vehicle=Swift, KA-01-12345, Destination=Bangalore"),
    ("offer-ride", "Shipra, Origin=Bangalore, Available Seats=1, Vehicle=Activa, KA-12-12332, Destination=Mysore"),
    ("offer-ride", "Shipra, Origin=Bangalore, Available Seats=2, Vehicle=Polo, KA-05-41491, Destination=Mysore"),
    ("offer-ride", "Shashank, Origin=Hyderabad, Available Seats=2, Vehicle=Baleno, TS-05-62395, Destination=Bangalore"),
    ("offer-ride", "Rahul, Origin=Pune, Available Seats=5, Vehicle=XUV, KA-05-1234, Destination=Bangalore"),
    ("offer-ride", "Rohan, Origin=Mumbai, Available Seats=1, Vehicle=Swift, KA-01-12345, Destination=Delhi"),
    ("offer-ride", "Rohan, Origin=Mumbai, Available Seats=1, Vehicle=Polo, KA-01-44252, Destination=Pune"),
]

SAMPLE_SELECTIONS = [
    ("select-ride", "Nandini, Bangalore, Mysore, 1, Most Vacant"),
    ("select-ride", "Gaurav, Bangalore, Mysore, 1, Preferred Vehicle=Activa"),
    ("select-ride", "Shashank, Mumbai, Mysore, 1, Most Vacant"),
    ("select-ride", "Rohan, Hyderabad, Bangalore, 1, Preferred Vehicle=Baleno"),
    ("select-ride", "Shashank, Hyderabad, Bangalore, 1, Preferred Vehicle=Polo"),
]
