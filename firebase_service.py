import os
import json
import firebase_admin
from firebase_admin import credentials, firestore
from google.auth.credentials import AnonymousCredentials
from google.cloud import firestore as gcloud_firestore
import logging

logger = logging.getLogger(__name__)

# Firestore rejects batches with more than 500 writes
MAX_BATCH_SIZE = 500


def init_firestore(config, emulator=False, app_name=None):
    """
    One-time Firestore setup, called by the process entry point.

    Args:
        config: Config class or object with the FIREBASE_* settings
        emulator: Connect to the local emulator instead of production
        app_name: Optional firebase_admin app name (for several apps in one process)

    Returns:
        FirebaseService wrapping the new client
    """
    project_id = config.FIREBASE_PROJECT_ID

    if emulator:
        # The client reads FIRESTORE_EMULATOR_HOST at construction time
        os.environ['FIRESTORE_EMULATOR_HOST'] = config.FIRESTORE_EMULATOR_ADDRESS
        logger.info(f"Connecting to Firestore emulator at {config.FIRESTORE_EMULATOR_ADDRESS} (project {project_id})")
        db = gcloud_firestore.Client(project=project_id, credentials=AnonymousCredentials())
        return FirebaseService(db, emulator=True)

    name = app_name or firebase_admin._DEFAULT_APP_NAME
    try:
        app = firebase_admin.get_app(name)
        logger.info(f"Reusing initialized Firebase app '{name}'")
    except ValueError:
        creds_json = getattr(config, 'FIREBASE_CREDENTIALS_JSON', '')
        if creds_json:
            logger.info("Loading Firebase credentials from environment variable")
            cred = credentials.Certificate(json.loads(creds_json))
        else:
            creds_path = config.FIREBASE_CREDENTIALS_PATH
            logger.info(f"Loading Firebase credentials from file: {creds_path}")
            cred = credentials.Certificate(creds_path)
        app = firebase_admin.initialize_app(cred, {'projectId': project_id}, name=name)

    # A leftover emulator host (from .env or an earlier emulator client) would redirect this client
    if os.environ.pop('FIRESTORE_EMULATOR_HOST', None):
        logger.warning("Ignoring FIRESTORE_EMULATOR_HOST for the production client")
    db = firestore.client(app=app)
    logger.info(f"Firebase initialized successfully (project {project_id})")
    return FirebaseService(db)


class FirebaseService:
    """Thin wrapper over a Firestore client; the client is created by init_firestore"""

    def __init__(self, db, emulator=False):
        self.db = db
        self.emulator = emulator

    @property
    def target(self):
        return 'emulator' if self.emulator else 'production'

    # ==================== DOCUMENTS ====================

    def get_document(self, collection, doc_id):
        """Get a document by ID, or None when it does not exist"""
        doc = self.db.collection(collection).document(doc_id).get()
        if doc.exists:
            return doc.to_dict()
        return None

    def write_document(self, collection, doc_id, fields, merge=True):
        """Write a document, merging into or replacing the existing one"""
        doc_ref = self.db.collection(collection).document(doc_id)
        doc_ref.set(fields, merge=merge)
        return doc_ref.get().to_dict()

    def update_document(self, collection, doc_id, fields, touch=False):
        """
        Update fields of an existing document.

        Raises google.api_core.exceptions.NotFound when the document is missing.
        """
        doc_ref = self.db.collection(collection).document(doc_id)
        update_data = dict(fields)
        if touch:
            update_data['updatedAt'] = firestore.SERVER_TIMESTAMP
        doc_ref.update(update_data)
        return doc_ref.get().to_dict()

    # ==================== COLLECTIONS ====================

    def list_documents(self, collection, where=None):
        """
        Get all documents of a collection, each with its 'id'.

        Args:
            collection: Collection name
            where: Optional list of (field, op, value) filters
        """
        query = self.db.collection(collection)
        for field, op, value in where or []:
            query = query.where(field, op, value)

        documents = []
        for doc in query.stream():
            data = doc.to_dict() or {}
            data.setdefault('id', doc.id)
            data['_docId'] = doc.id
            documents.append(data)
        return documents

    def list_collections(self):
        """Get IDs of all top-level collections"""
        return [col.id for col in self.db.collections()]

    # ==================== BATCHED WRITES ====================

    def batch_write(self, collection, documents, merge=False):
        """
        Write documents keyed by ID, committing in groups of MAX_BATCH_SIZE.

        Args:
            collection: Collection name
            documents: Dict of doc_id -> fields

        Returns:
            Number of documents written
        """
        items = list(documents.items())
        written = 0
        for start in range(0, len(items), MAX_BATCH_SIZE):
            batch = self.db.batch()
            chunk = items[start:start + MAX_BATCH_SIZE]
            for doc_id, fields in chunk:
                batch.set(self.db.collection(collection).document(doc_id), fields, merge=merge)
            batch.commit()
            written += len(chunk)
            logger.info(f"Committed {len(chunk)} writes to {collection} ({self.target})")
        return written

    def clear_collection(self, collection):
        """Delete every document of a collection in batched commits"""
        refs = [doc.reference for doc in self.db.collection(collection).stream()]
        for start in range(0, len(refs), MAX_BATCH_SIZE):
            batch = self.db.batch()
            for ref in refs[start:start + MAX_BATCH_SIZE]:
                batch.delete(ref)
            batch.commit()
        logger.info(f"Deleted {len(refs)} documents from {collection} ({self.target})")
        return len(refs)
