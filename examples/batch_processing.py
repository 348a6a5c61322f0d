"""Batch processing example for multiple data files."""

from pathlib import Path
from consensus.core import ConsensusProcessor
from consensus.engine.errors import ConsensusError
from consensus.utils.io_handler import read_ascii_floats, JSONWriter
from consensus.utils.logger import setup_logger


def main():
    """Fit a line to every data file of a directory."""
    logger = setup_logger('batch_processor')
    
    processor = ConsensusProcessor({"ransac": {"ntrials": 500, "max_error": 0.5, "min_inliers": 10}})
    
    data_dir = Path("test_data/points")
    data_files = sorted(data_dir.glob("*.txt"))
    
    logger.info(f"Processing {len(data_files)} files...")
    
    results = []
    for i, data_path in enumerate(data_files):
        logger.info(f"Processing file {i+1}/{len(data_files)}: {data_path.name}")
        
        with open(data_path) as f:
            values = read_ascii_floats(f)
        
        try:
            result = processor.process(values[:len(values) // 2 * 2], "line")
        except ConsensusError as e:
            logger.warning(f"Could not fit {data_path}: {e}")
            continue
        
        result['file_name'] = data_path.name
        results.append(result)
    
    # Save results
    JSONWriter.save_results(results, "output/batch_results.json")
    logger.info(f"Saved {len(results)} results")


if __name__ == "__main__":
    main()
