"""
Sync Service - copy production collections into the local emulator
"""
import logging

logger = logging.getLogger(__name__)


class SyncService:
    """Copies documents from a source store to a target store, by document ID"""

    def __init__(self, source, target):
        self.source = source
        self.target = target

    def sync_collection(self, collection):
        """
        Replace a target collection with the source documents.

        Returns:
            Number of documents copied (0 when the source is empty, target untouched)
        """
        documents = {doc.id: doc.to_dict() for doc in self.source.db.collection(collection).stream()}
        if not documents:
            logger.info(f"No documents found in {collection}, skipping")
            return 0

        logger.info(f"Found {len(documents)} documents in {collection}")
        self.target.clear_collection(collection)
        copied = self.target.batch_write(collection, documents)

        for doc_id, data in list(documents.items())[:2]:
            logger.info(f"  {doc_id}: {data.get('name') or data.get('id') or 'unnamed'}"
                        f"{' (' + str(len(data['variants'])) + ' variants)' if data.get('variants') else ''}")
        return copied

    def sync(self, collections=None):
        """
        Sync collections (all source collections when None).

        Returns:
            Dict with 'copied' (collection -> count) and 'failed' (collection -> error)
        """
        names = list(collections) if collections else self.source.list_collections()
        logger.info(f"Syncing {len(names)} collection(s) from {self.source.target} to {self.target.target}")

        result = {'copied': {}, 'failed': {}}
        for name in names:
            try:
                result['copied'][name] = self.sync_collection(name)
            except Exception as e:
                logger.error(f"Error syncing {name}: {str(e)}")
                result['failed'][name] = str(e)

        logger.info(f"Sync completed: {sum(result['copied'].values())} documents copied, "
                    f"{len(result['failed'])} collection(s) failed")
        return result
