# Bounded-retry transaction submission.

from mint_batcher.submitter.executor import (
    SubmissionOutcome,
    SubmissionState,
    submit_with_retry,
)

__all__ = ["SubmissionOutcome", "SubmissionState", "submit_with_retry"]
