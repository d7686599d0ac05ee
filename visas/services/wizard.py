import logging

from ..forms import VisaInfoForm
from .assembler import assemble_configuration

logger = logging.getLogger(__name__)


STEP_FLOW = 1        # Define flow & documents
STEP_COSTS = 2       # Costs & processing details
STEP_REVIEW = 3      # Review & confirm
STEP_SAVED = 'saved'

STEP_LABELS = {
    STEP_FLOW: 'Step 1: Define Flow & Documents',
    STEP_COSTS: 'Step 2: Costs & Processing Details',
    STEP_REVIEW: 'Step 3: Review & Confirm',
    STEP_SAVED: 'Saved',
}


class TransitionResult:
    """
    Outcome of a wizard transition. 'errors' uses the Django form error
    layout: {field: [{'message': ..., 'code': ...}]}.
    """

    def __init__(self, ok, step, errors=None, document=None):
        self.ok = ok
        self.step = step
        self.errors = errors or {}
        self.document = document

    def __bool__(self):
        return self.ok

    def as_dict(self):
        data = {
            'ok': self.ok,
            'step': self.step,
            'step_label': STEP_LABELS[self.step],
            'errors': self.errors,
        }
        if self.document is not None:
            data['document'] = self.document
        return data


class BuilderWizard:
    """
    Step1 -> Step2 -> Step3 -> Saved, with backward moves and a reset that
    returns to Step1 from anywhere.

    Only Step1 -> Step2 is guarded (VisaInfoForm). Step2 -> Step3 lets any
    values through, and saving does not validate again.
    """

    def __init__(self, builder, step=STEP_FLOW):
        self.builder = builder
        self.step = step

    def _refuse(self, action):
        logger.warning(f"Wizard: '{action}' is not allowed from step {self.step}")
        return TransitionResult(False, self.step, errors={
            '__all__': [{
                'message': f"Cannot {action} from {STEP_LABELS[self.step]}.",
                'code': 'invalid_transition',
            }]
        })

    def _move_to(self, step):
        logger.info(f"Wizard: step {self.step} -> {step}")
        self.step = step
        return TransitionResult(True, step)

    # ==========================================
    # 1. FORWARD
    # ==========================================

    def validate_info(self):
        return VisaInfoForm(data={
            'name': self.builder.name,
            'type_id': self.builder.type_id,
            'code': self.builder.code,
        })

    def next_step(self):
        if self.step == STEP_FLOW:
            form = self.validate_info()
            if not form.is_valid():
                errors = form.errors.get_json_data()
                logger.info(f"Step 1 validation failed on: {', '.join(errors)}")
                return TransitionResult(False, self.step, errors=errors)
            return self._move_to(STEP_COSTS)

        if self.step == STEP_COSTS:
            return self._move_to(STEP_REVIEW)

        return self._refuse('go forward')

    def review(self):
        # "Review Configuration" button of Step 2 (no guard)
        if self.step != STEP_COSTS:
            return self._refuse('open the review')
        return self._move_to(STEP_REVIEW)

    def save(self, persist=None, version=1, now=None):
        """
        Assembles the document and hands it to 'persist'. The local move to
        Saved always happens; a failing hand-off is only logged.
        """
        if self.step != STEP_REVIEW:
            return self._refuse('save')

        document = assemble_configuration(
            self.builder.snapshot(), version=version, now=now)

        if persist is not None:
            try:
                persist(document)
            except Exception as e:
                logger.error(
                    f"Persisting configuration {document['typeId']} v{document['version']} failed: {e}")

        result = self._move_to(STEP_SAVED)
        result.document = document
        return result

    # ==========================================
    # 2. BACKWARD / RESET
    # ==========================================

    def previous_step(self):
        if self.step == STEP_COSTS:
            return self._move_to(STEP_FLOW)
        if self.step == STEP_REVIEW:
            return self._move_to(STEP_COSTS)
        return self._refuse('go back')

    def reset(self):
        self.builder.reset()
        return self._move_to(STEP_FLOW)
