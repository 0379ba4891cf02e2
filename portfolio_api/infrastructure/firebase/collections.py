"""Firestore collection names (schema-in-code).

Firestore has no DDL or migrations. Collections are created automatically
when the first document is written. Use these constants so collection names
stay consistent with the documents the portfolio frontend already reads.

Example:
    from portfolio_api.infrastructure.firebase.client import get_firestore_client
    from portfolio_api.infrastructure.firebase.collections import COLLECTION_PROJECTS

    db = get_firestore_client()
    if db:
        await db.collection(COLLECTION_PROJECTS).document(project_id).get()
"""

# Content collections (one document per item)
COLLECTION_PROJECTS = "projects"
COLLECTION_PRICING = "pricing"
COLLECTION_SERVICES = "services"

# Resume sections
COLLECTION_RESUME_EXPERIENCES = "resume_experiences"
COLLECTION_RESUME_EDUCATION = "resume_education"
COLLECTION_RESUME_SKILLS = "resume_skills"
COLLECTION_RESUME_CERTIFICATIONS = "resume_certifications"

# Singleton documents (collection, document id)
COLLECTION_CONTACT_DETAILS = "contactDetails"
DOCUMENT_CONTACT_DETAILS = "details"
COLLECTION_VERSION = "version"
DOCUMENT_VERSION = "current"
