# visas/defaults.py
#
# Catalog data the builder starts from.
# Fixed and final stages are always part of the flow, in this order.
# Conditional stages carry the default 'enabled' flag restored on reset.

VISA_CATEGORIES = [
    'Business',
    'Tourist',
    'Student',
    'Work',
    'Medical',
    'Religious',
]

FALLBACK_CURRENCY = 'GBP'

# Key used in the per-browser store for the in-progress visa code
RESUMABLE_CODE_KEY = 'visaBuilder_visaCode'

# Key used in the session for the whole working state
SESSION_STATE_KEY = 'visa_builder_state'

# The stage that collects the configurable documents
DOCUMENTS_STAGE_ID = 'DYNAMIC_DOCUMENTS_UPLOAD'


FIXED_STAGES = (
    {'id': 'ELIGIBILITY_CHECK', 'name': 'Eligibility Check'},
    {'id': 'SMS_VERIFICATION', 'name': 'SMS Verification'},
    {'id': 'PASSPORT_UPLOAD', 'name': 'Passport Upload'},
    {'id': 'RESIDENCY_INFO', 'name': 'Residency Information'},
    {'id': 'KYC_LIVENESS', 'name': 'KYC & Liveness Check'},
    {'id': 'PHOTO_UPLOAD', 'name': 'Photo Upload'},
)

FINAL_STAGES = (
    {'id': 'APPLICATION_REVIEW', 'name': 'Application Review'},
    {'id': 'PAYMENT', 'name': 'Payment'},
    {'id': 'SUBMISSION', 'name': 'Submission'},
)

CONDITIONAL_STAGES = (
    {'id': 'EXISTING_VISAS', 'name': 'Existing Visas', 'enabled': False,
     'categories': ['Business', 'Tourist', 'Work']},
    {'id': 'TRAVEL_DETAILS', 'name': 'Travel Details', 'enabled': True,
     'categories': ['Business', 'Tourist']},
    {'id': 'TRAVEL_INSURANCE', 'name': 'Travel Insurance', 'enabled': True,
     'categories': ['Business', 'Tourist']},
    {'id': 'STUDENT_INFO', 'name': 'Student Information', 'enabled': False,
     'categories': ['Student']},
    {'id': 'RELIGION_WORKER_INFO', 'name': 'Religious Worker Info', 'enabled': False,
     'categories': ['Religious']},
    {'id': 'MEDICAL_WORKER_INFO', 'name': 'Medical Worker Info', 'enabled': False,
     'categories': ['Medical']},
    {'id': 'PROFESSIONAL_INFO', 'name': 'Professional Information', 'enabled': True,
     'categories': ['Business', 'Work']},
    {'id': 'FINANCIAL_INFO', 'name': 'Financial Information', 'enabled': True,
     'categories': ['Business', 'Work']},
    {'id': DOCUMENTS_STAGE_ID, 'name': 'Additional Documents', 'enabled': True,
     'categories': list(VISA_CATEGORIES)},
)

DOCUMENT_TYPES = (
    {'id': 'invitation_letter', 'name': 'Invitation Letter', 'enabled': False,
     'description': 'Official letter from host.', 'purpose': 'Verify business visit.',
     'format': 'PDF/JPEG', 'examples': ['Company letterhead'],
     'categories': ['Business', 'Work']},
    {'id': 'business_itinerary', 'name': 'Business Itinerary', 'enabled': False,
     'description': 'Detailed schedule.', 'purpose': 'Confirm business trip nature.',
     'format': 'PDF/DOC', 'examples': ['Meeting schedules'],
     'categories': ['Business', 'Work']},
    {'id': 'job_offer', 'name': 'Job Offer Letter', 'enabled': False,
     'description': 'Official job offer.', 'purpose': 'Verify employment.',
     'format': 'PDF', 'examples': ['Salary, title, start date'],
     'categories': ['Work']},
    {'id': 'degree_certificate', 'name': 'Degree Certificate', 'enabled': False,
     'description': 'University degree.', 'purpose': 'Verify education.',
     'format': 'PDF/JPEG', 'examples': ['Certificate image'],
     'categories': ['Student', 'Work']},
    {'id': 'enrollment_proof', 'name': 'Enrollment Proof', 'enabled': False,
     'description': 'Proof from institution.', 'purpose': 'Verify student status.',
     'format': 'PDF', 'examples': ['Letter of acceptance'],
     'categories': ['Student']},
    {'id': 'professional_letter', 'name': 'Professional Reference', 'enabled': False,
     'description': 'Letter from accountant/lawyer.', 'purpose': 'Verify professional status.',
     'format': 'PDF', 'examples': ['CPA proof'],
     'categories': ['Work']},
    {'id': 'financial_statements', 'name': 'Financial Statements', 'enabled': False,
     'description': 'Bank statements/proof.', 'purpose': 'Establish financial capability.',
     'format': 'PDF/JPEG', 'examples': ['3 months statements'],
     'categories': ['Business', 'Work', 'Student']},
)

# AI validations run on submitted documents
AI_SCANS = (
    {'id': 'PASSPORT_VALIDITY', 'name': 'Passport Validity', 'enabled': True},
    {'id': 'FACE_MATCHING', 'name': 'Face Matching', 'enabled': True},
    {'id': 'DATES_VALIDATION', 'name': 'Dates Validation', 'enabled': True},
    {'id': 'LIVENESS_CHECK', 'name': 'Liveness Check', 'enabled': True},
    {'id': 'DYNAMIC_DOCUMENTS_SCAN', 'name': 'Dynamic Documents Scan', 'enabled': True},
    {'id': 'ROOTEDNESS_ANALYSIS', 'name': 'Rootedness Analysis', 'enabled': True},
    {'id': 'INTENT_ANALYSIS', 'name': 'Intent Analysis', 'enabled': True},
)

TIME_UNITS = ('HOURS', 'DAYS', 'WEEKS')

# Blank rows appended by the "add" buttons of Step 2
DEFAULT_PROCESSING_TIER = {
    'type': 'STANDARD',
    'timeframe': '',
    'timeUnit': 'WEEKS',
    'minTime': 0,
    'maxTime': 0,
}

DEFAULT_ADDITIONAL_COST = {
    'description': '',
    'amount': 0,
    'currency': FALLBACK_CURRENCY,
}
