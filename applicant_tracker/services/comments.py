from typing import List

from applicant_tracker.schemas.schemas import Comment


def merge_comment(existing: List[Comment], new_comment: Comment) -> List[Comment]:
    """
    Return a new comment list with any earlier comment by the same person
    dropped and new_comment appended last. `existing` is not modified.
    """
    merged = [comment for comment in existing if comment.person != new_comment.person]
    merged.append(new_comment)
    return merged
