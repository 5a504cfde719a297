# lawyer_point/data.py

DEFAULT_TIMES = [
    "08.00 AM - 08.30 AM",
    "08.30 AM - 09.00 AM",
    "09.00 AM - 09.30 AM",
    "09.30 AM - 10.00 AM",
    "10.00 AM - 10.30 AM",
    "10.30 AM - 11.00 AM",
    "11.00 AM - 11.30 AM",
    "11.30 AM - 12.00 PM",
    "02.00 PM - 02.30 PM",
    "02.30 PM - 03.00 PM",
    "03.00 PM - 03.30 PM",
    "03.30 PM - 04.00 PM",
]

# lawsuit category -> consultation fee
APPOINTMENT_OPTIONS = {
    "Family Law": 50,
    "Divorce": 60,
    "Criminal Defense": 90,
    "Property Dispute": 70,
    "Immigration": 80,
    "Corporate Law": 120,
}
