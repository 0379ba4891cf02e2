"""Infrastructure: Firestore, object storage, identity verification and external HTTP APIs."""
