"""The purge job: plan deletion of junk files, extension renames and removal of empty directories."""