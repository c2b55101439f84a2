"""
Sample employee roster loaded at startup

Builds the demo employees shown on a fresh dashboard: a fixed set in
central Riyadh, plus randomly generated staff spread over Riyadh
neighborhoods and the cities of the other regions.
"""

from datetime import datetime, timedelta, timezone
from typing import List, Optional
import random

from staff_tracker.models.employee import EmployeeStatus

RIYADH_REGION_ID = "riyadh"
RIYADH_CITY_ID = "riyadh-city"

MALE_FIRST_NAMES = [
    "أحمد", "محمد", "علي", "حسن", "خالد", "عبدالله", "يوسف", "إبراهيم", "عبدالعزيز", "فهد",
    "سلطان", "ناصر", "سعد", "فيصل", "عبدالرحمن", "طلال", "بندر", "ماجد", "سلمان", "تركي",
]
FEMALE_FIRST_NAMES = [
    "فاطمة", "عائشة", "خديجة", "زينب", "مريم", "سارة", "نورا", "هند", "ريم", "منى",
    "أمل", "رانيا", "دانة", "شهد", "لجين", "روان", "غدير", "جود", "لمى", "نهى",
]
LAST_NAMES = [
    "أحمد", "علي", "محمد", "عبدالله", "السعيد", "الأحمد", "الحربي", "العتيبي", "المطيري", "الدوسري",
    "القحطاني", "الغامدي", "الزهراني", "الشهري", "عسيري", "الثقفي", "البقمي", "الجهني", "العوفي", "السلمي",
]

# (neighborhood id, label, lat, lng)
RIYADH_NEIGHBORHOODS = [
    ("olaya", "حي العليا", 24.7000, 46.6900),
    ("malaz", "حي الملز", 24.6877, 46.7219),
    ("nakheel", "حي النخيل", 24.7136, 46.6753),
    ("rawdah", "حي الروضة", 24.7200, 46.6400),
    ("sahafa", "حي الصحافة", 24.7300, 46.6600),
    ("yasmin", "حي الياسمين", 24.7400, 46.6500),
    ("hamra", "حي الحمراء", 24.7500, 46.6700),
    ("sulaymaniyah", "حي السليمانية", 24.6900, 46.6800),
    ("mursalat", "حي المرسلات", 24.7100, 46.6200),
    ("qadisiyah", "حي القادسية", 24.6950, 46.7150),
    ("narjis", "حي النرجس", 24.7250, 46.6350),
    ("wahat", "حي الواحة", 24.7350, 46.6450),
    ("rabee", "حي الربيع", 24.7450, 46.6550),
    ("worod", "حي الورود", 24.7150, 46.6650),
    ("nada", "حي الندى", 24.7050, 46.6750),
    ("falah", "حي الفلاح", 24.6850, 46.6850),
    ("khaleej", "حي الخليج", 24.6750, 46.6950),
    ("badeea", "حي البديعة", 24.7550, 46.6250),
    ("ghadeer", "حي الغدير", 24.7650, 46.6150),
    ("munsiyah", "حي المونسية", 24.7750, 46.6050),
    ("qurtuba", "حي قرطبة", 24.7850, 46.5950),
    ("ramal", "حي الرمال", 24.7950, 46.5850),
    ("naseem", "حي النسيم", 24.8050, 46.5750),
    ("rawabi", "حي الروابي", 24.8150, 46.5650),
]

# Northern neighborhoods that always get two employees each
NORTH_RIYADH_NEIGHBORHOODS = RIYADH_NEIGHBORHOODS[-5:]

# (region id, [(city id, label, lat, lng), ...])
REGION_CITIES = [
    ("makkah", [
        ("makkah-city", "مكة المكرمة", 21.4225, 39.8262),
        ("jeddah", "جدة", 21.4858, 39.1925),
        ("taif", "الطائف", 21.2703, 40.4150),
    ]),
    ("medina", [
        ("medina-city", "المدينة المنورة", 24.4681, 39.6142),
        ("yanbu", "ينبع", 24.0896, 38.0618),
    ]),
    ("eastern", [
        ("dammam", "الدمام", 26.4207, 50.0888),
        ("khobar", "الخبر", 26.2172, 50.1971),
        ("ahsa", "الأحساء", 25.4295, 49.5930),
        ("jubail", "الجبيل", 27.0174, 49.6251),
    ]),
    ("asir", [
        ("abha", "أبها", 18.2164, 42.5048),
        ("khamis", "خميس مشيط", 18.3059, 42.7289),
    ]),
    ("tabuk", [("tabuk-city", "تبوك", 28.3998, 36.5700)]),
    ("hail", [("hail-city", "حائل", 27.5114, 41.6900)]),
    ("northern", [("arar", "عرعر", 30.9753, 41.0381)]),
    ("jazan", [("jazan-city", "جازان", 16.8892, 42.5511)]),
    ("najran", [("najran-city", "نجران", 17.4924, 44.1277)]),
    ("baha", [("baha-city", "الباحة", 20.0129, 41.4687)]),
    ("jouf", [("sakaka", "سكاكا", 29.9697, 40.2064)]),
    ("qassim", [
        ("buraidah", "بريدة", 26.3260, 43.9750),
        ("unaizah", "عنيزة", 26.0877, 43.9986),
    ]),
]

LANGUAGE_SETS = [
    ["العربية"],
    ["العربية", "الإنجليزية"],
    ["العربية", "الإنجليزية", "الفرنسية"],
    ["العربية", "الأردية"],
    ["العربية", "الإنجليزية", "الأردية"],
    ["العربية", "التركية"],
    ["العربية", "الإنجليزية", "الألمانية"],
]
COURSE_SETS = [
    ["خدمة العملاء"],
    ["المبيعات"],
    ["التسويق الرقمي"],
    ["إدارة المشاريع"],
    ["التفاوض"],
    ["المبيعات", "خدمة العملاء"],
    ["التسويق", "المبيعات"],
    ["إدارة الوقت", "القيادة"],
    ["التسويق الرقمي", "وسائل التواصل"],
    ["المبيعات", "التفاوض", "إدارة العملاء"],
]
COMPANIES = [
    "شركة الاتصالات", "مؤسسة الخليج", "شركة البناء", "مجموعة الرياض",
    "شركة الصناعات", "مؤسسة التجارة", "شركة التقنية", "مجموعة الاستثمار",
]

SCATTERED_PHONE_RANGE = range(9, 41)


def _fixed_employee(name, phone, status, lat, lng, neighborhood_id, label, languages, courses,
                    last_update, customer_id=None, customer_name=None) -> dict:
    return {
        "name": name,
        "phone": phone,
        "status": status,
        "latitude": lat,
        "longitude": lng,
        "location": label,
        "region_id": RIYADH_REGION_ID,
        "city_id": RIYADH_CITY_ID,
        "neighborhood_id": neighborhood_id,
        "last_update": last_update,
        "customer_id": customer_id,
        "customer_name": customer_name,
        "languages": languages,
        "training_courses": courses,
    }


def fixed_employees(now: datetime) -> List[dict]:
    """The eight hand-written Riyadh employees"""
    return [
        _fixed_employee("محمد أحمد", "0501234567", "available", "24.7136", "46.6753", "nakheel", "حي النخيل",
                        ["العربية", "الإنجليزية"], ["التسويق الرقمي", "المبيعات"], now),
        _fixed_employee("سارة علي", "0501234568", "busy", "24.7000", "46.6900", "olaya", "حي العليا",
                        ["العربية", "الإنجليزية", "الفرنسية"], ["خدمة العملاء", "التسويق"], now,
                        customer_id="CUST001", customer_name="شركة الاتصالات"),
        _fixed_employee("خالد عبدالله", "0501234569", "offline", "24.6877", "46.7219", "malaz", "حي الملز",
                        ["العربية"], ["المبيعات", "إدارة الوقت"], now - timedelta(hours=1)),
        _fixed_employee("فاطمة محمد", "0501234570", "available", "24.7200", "46.6400", "rawdah", "حي الروضة",
                        ["العربية", "الإنجليزية"], ["إدارة المشاريع", "التسويق"], now),
        _fixed_employee("علي حسن", "0501234571", "busy", "24.7300", "46.6600", "sahafa", "حي الصحافة",
                        ["العربية", "الإنجليزية", "الأردية"], ["المبيعات", "التفاوض"], now,
                        customer_id="CUST002", customer_name="مؤسسة الخليج"),
        _fixed_employee("منى سالم", "0501234572", "available", "24.7400", "46.6500", "yasmin", "حي الياسمين",
                        ["العربية"], ["خدمة العملاء"], now),
        _fixed_employee("عمر إبراهيم", "0501234573", "busy", "24.7500", "46.6700", "hamra", "حي الحمراء",
                        ["العربية", "الإنجليزية"], ["التسويق", "المبيعات", "إدارة الوقت"], now,
                        customer_id="CUST003", customer_name="شركة البناء"),
        _fixed_employee("هند عبدالرحمن", "0501234574", "available", "24.7600", "46.6800", "rabee", "حي الربيع",
                        ["العربية", "الإنجليزية", "الفرنسية"], ["إدارة المشاريع", "القيادة"], now),
    ]


class SampleRosterGenerator:
    """Random employees around known centre points"""

    def __init__(self, rng: random.Random, now: datetime):
        self.rng = rng
        self.now = now

    def full_name(self, female_threshold: float = 0.5) -> str:
        if self.rng.random() > female_threshold:
            first = self.rng.choice(FEMALE_FIRST_NAMES)
        else:
            first = self.rng.choice(MALE_FIRST_NAMES)
        return f"{first} {self.rng.choice(LAST_NAMES)}"

    def jitter(self, value: float, spread: float) -> str:
        return f"{value + (self.rng.random() - 0.5) * spread:.6f}"

    def employee(self, name: str, phone: str, lat: float, lng: float, spread: float,
                 label: str, region_id: str, city_id: str, neighborhood_id: str) -> dict:
        status = self.rng.choice(list(EmployeeStatus))
        busy = status == EmployeeStatus.BUSY

        # Offline staff reported in up to two hours ago, the rest within half an hour
        max_age = 7200 if status == EmployeeStatus.OFFLINE else 1800

        return {
            "name": name,
            "phone": phone,
            "status": status,
            "latitude": self.jitter(lat, spread),
            "longitude": self.jitter(lng, spread),
            "location": label,
            "region_id": region_id,
            "city_id": city_id,
            "neighborhood_id": neighborhood_id,
            "last_update": self.now - timedelta(seconds=self.rng.random() * max_age),
            "customer_id": f"CUST{self.rng.randrange(999):03d}" if busy else None,
            "customer_name": self.rng.choice(COMPANIES) if busy else None,
            "languages": list(self.rng.choice(LANGUAGE_SETS)),
            "training_courses": list(self.rng.choice(COURSE_SETS)),
        }

    def north_riyadh(self) -> List[dict]:
        """Two employees in each northern Riyadh neighborhood"""
        records = []
        for idx, (n_id, label, lat, lng) in enumerate(NORTH_RIYADH_NEIGHBORHOODS):
            for j in range(2):
                name = self.full_name()
                phone = f"05012{100 + idx * 10 + j}{self.rng.randrange(100):02d}"
                records.append(self.employee(name, phone, lat, lng, 0.01, label,
                                             RIYADH_REGION_ID, RIYADH_CITY_ID, n_id))
        return records

    def other_regions(self) -> List[dict]:
        """Two to four employees around every city outside Riyadh"""
        records = []
        for region_id, cities in REGION_CITIES:
            for city_id, label, lat, lng in cities:
                for _ in range(self.rng.randint(2, 4)):
                    name = self.full_name()
                    phone = f"05013{self.rng.randrange(100000, 1000000)}"
                    records.append(self.employee(name, phone, lat, lng, 0.02, label,
                                                 region_id, city_id, f"{city_id}-center"))
        return records

    def scattered_riyadh(self) -> List[dict]:
        """Employees dropped into random Riyadh neighborhoods"""
        records = []
        for i in SCATTERED_PHONE_RANGE:
            name = self.full_name(female_threshold=0.6)
            n_id, label, lat, lng = self.rng.choice(RIYADH_NEIGHBORHOODS)
            records.append(self.employee(name, f"05012345{i:02d}", lat, lng, 0.02, label,
                                         RIYADH_REGION_ID, RIYADH_CITY_ID, n_id))
        return records


def generate_sample_employees(seed: Optional[int] = None, now: Optional[datetime] = None) -> List[dict]:
    """Build the startup roster in insertion order"""
    now = now or datetime.now(timezone.utc)
    generator = SampleRosterGenerator(random.Random(seed), now)

    records = fixed_employees(now)
    records.extend(generator.north_riyadh())
    records.extend(generator.other_regions())
    records.extend(generator.scattered_riyadh())
    return records
